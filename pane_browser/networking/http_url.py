from .http_base import HTTPBase


class HTTPURL(HTTPBase):
    default_port = 80
