#
#
#

import logging

from requests import RequestException, Session

from octodns import __VERSION__ as octodns_version

from . import __version__ as package_version
from .exceptions import (
    CloudflareClientNotFound,
    CloudflareClientRequestError,
    CloudflareClientUnauthorized,
)


class CloudflareClient(object):
    BASE_URL = 'https://api.cloudflare.com/client/v4'

    def __init__(self, token=None, email=None, key=None, base_url=None):
        self.log = logging.getLogger('CloudflareClient')
        if token:
            auth = {'Authorization': f'Bearer {token}'}
        elif email and key:
            auth = {'X-Auth-Email': email, 'X-Auth-Key': key}
        else:
            raise ValueError(
                'CloudflareClient requires either a token or an email and key'
            )

        session = Session()
        session.headers.update(
            {
                'User-Agent': f'octodns/{octodns_version} octodns-virtualdns/{package_version}',
            }
        )
        session.headers.update(auth)
        self._session = session
        self.base_url = (base_url or self.BASE_URL).rstrip('/')

    def _errors(self, response):
        try:
            data = response.json()
        except ValueError:
            return ''
        if not isinstance(data, dict):
            return ''
        messages = [
            e.get('message', '')
            for e in data.get('errors') or []
            if isinstance(e, dict)
        ]
        return ', '.join(m for m in messages if m)

    def _do(self, method, uri, data=None, timeout=None):
        url = f'{self.base_url}{uri}'
        try:
            response = self._session.request(
                method, url, json=data, timeout=timeout
            )
        except RequestException as e:
            raise CloudflareClientRequestError(
                f'request failed: {e}'
            ) from e
        self.log.debug(
            '_do: method=%s, uri=%s, status=%d',
            method,
            uri,
            response.status_code,
        )
        if response.status_code in (401, 403):
            raise CloudflareClientUnauthorized(response.status_code)
        if response.status_code == 404:
            raise CloudflareClientNotFound()
        if not 200 <= response.status_code < 300:
            msg = f'HTTP status {response.status_code}'
            details = self._errors(response) or response.reason
            if details:
                msg = f'{msg}: {details}'
            raise CloudflareClientRequestError(
                msg,
                response.status_code,
            )
        return response

    def make_request(self, method, uri, body=None, timeout=None):
        return self._do(method, uri, body, timeout).content
