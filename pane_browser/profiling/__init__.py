# Profiling (Chrome Tracing Format)
from .measure_time import MeasureTime, Tracer, set_thread_name, trace_instant

__all__ = ['MeasureTime', 'Tracer', 'set_thread_name', 'trace_instant']
