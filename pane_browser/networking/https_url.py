import ssl

from .http_base import HTTPBase


class HTTPSURL(HTTPBase):
    default_port = 443

    def _wrap_socket(self, s):
        ctx = ssl.create_default_context()
        return ctx.wrap_socket(s, server_hostname=self.host)
