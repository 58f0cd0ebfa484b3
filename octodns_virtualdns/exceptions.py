#
#
#

from octodns.provider import ProviderException


class CloudflareClientException(ProviderException):
    pass


class CloudflareClientRequestError(CloudflareClientException):
    def __init__(self, msg, status_code=None):
        super().__init__(msg)
        self.status_code = status_code


class CloudflareClientNotFound(CloudflareClientRequestError):
    def __init__(self):
        super().__init__('Not Found', 404)


class CloudflareClientUnauthorized(CloudflareClientRequestError):
    def __init__(self, status_code=401):
        super().__init__('Unauthorized', status_code)


class CloudflareClientDecodeError(CloudflareClientException):
    pass
