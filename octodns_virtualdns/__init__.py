#
#
#

import json
import logging

from .clients import APIClient
from .exceptions import (
    CloudflareClientDecodeError,
    CloudflareClientException,
    CloudflareClientNotFound,
    CloudflareClientRequestError,
    CloudflareClientUnauthorized,
)
from .models import (
    VirtualDNS,
    VirtualDNSAnalytics,
    VirtualDNSAnalyticsMetrics,
    VirtualDNSUserAnalyticsOptions,
)
from .scopes import OrganizationScope, Scope, UserScope

__version__ = __VERSION__ = '0.1.0'

__all__ = [
    'CloudflareClientDecodeError',
    'CloudflareClientException',
    'CloudflareClientNotFound',
    'CloudflareClientRequestError',
    'CloudflareClientUnauthorized',
    'APIClient',
    'OrganizationScope',
    'Scope',
    'UserScope',
    'VirtualDNS',
    'VirtualDNSAnalytics',
    'VirtualDNSAnalyticsMetrics',
    'VirtualDNSClient',
    'VirtualDNSUserAnalyticsOptions',
]


def _optional_virtual_dns(result):
    if result is None:
        return None
    return VirtualDNS.from_dict(result)


def _virtual_dns_list(result):
    if result is None:
        return []
    if not isinstance(result, list):
        raise ValueError(
            f'result: expected list, got {type(result).__name__}'
        )
    return [VirtualDNS.from_dict(r) for r in result]


class VirtualDNSClient(object):
    '''
    Cloudflare Virtual DNS (DNS firewall) clusters

    Authenticate with either an API token or the account email and global
    API key:

        VirtualDNSClient('cf', token='...')
        VirtualDNSClient('cf', email='me@example.com', key='...')
    '''

    def __init__(self, id, token=None, **kwargs):
        self.log = logging.getLogger(f'VirtualDNSClient[{id}]')
        self.log.debug(
            '__init__: id=%s, token=***, email=%s',
            id,
            kwargs.get('email'),
        )
        self.id = id
        client = kwargs.pop('client', None)
        if client is None:
            client = self._create_client(token, **kwargs)
        elif not isinstance(client, APIClient):
            raise TypeError(
                f'client must provide make_request, got {type(client).__name__}'
            )
        self._client = client

    def _create_client(self, token, email=None, key=None, base_url=None):
        from .api_client import CloudflareClient

        return CloudflareClient(
            token=token, email=email, key=key, base_url=base_url
        )

    def _decode(self, res, parse):
        try:
            envelope = json.loads(res)
            if not isinstance(envelope, dict):
                raise ValueError(
                    f'envelope: expected object, got {type(envelope).__name__}'
                )
            return parse(envelope.get('result'))
        except (RecursionError, TypeError, ValueError) as e:
            raise CloudflareClientDecodeError(
                f'error unmarshalling the JSON response: {e}'
            ) from e

    # --- Scope-agnostic operations -----------------------------------------

    def create_virtual_dns(self, scope: Scope, v, timeout=None):
        self.log.debug('create_virtual_dns: scope=%r, name=%s', scope, v.name)
        return self._create_virtual_dns(scope.collection_path(), v, timeout)

    def _create_virtual_dns(self, uri, v, timeout):
        res = self._client.make_request(
            'POST', uri, v.to_payload(), timeout=timeout
        )
        return self._decode(res, _optional_virtual_dns)

    def virtual_dns(self, scope: Scope, virtual_dns_id, timeout=None):
        self.log.debug('virtual_dns: scope=%r, id=%s', scope, virtual_dns_id)
        return self._get_virtual_dns(scope.item_path(virtual_dns_id), timeout)

    def _get_virtual_dns(self, uri, timeout):
        res = self._client.make_request('GET', uri, None, timeout=timeout)
        return self._decode(res, _optional_virtual_dns)

    def list_virtual_dns(self, scope: Scope, timeout=None):
        self.log.debug('list_virtual_dns: scope=%r', scope)
        return self._list_virtual_dns(scope.collection_path(), timeout)

    def _list_virtual_dns(self, uri, timeout):
        res = self._client.make_request('GET', uri, None, timeout=timeout)
        ret = self._decode(res, _virtual_dns_list)
        self.log.debug('list_virtual_dns:   found %d clusters', len(ret))
        return ret

    def update_virtual_dns(self, scope: Scope, virtual_dns_id, v, timeout=None):
        self.log.debug(
            'update_virtual_dns: scope=%r, id=%s', scope, virtual_dns_id
        )
        self._update_virtual_dns(scope.item_path(virtual_dns_id), v, timeout)

    def _update_virtual_dns(self, uri, v, timeout):
        res = self._client.make_request(
            'PUT', uri, v.to_payload(), timeout=timeout
        )
        self._decode(res, _optional_virtual_dns)

    def delete_virtual_dns(self, scope: Scope, virtual_dns_id, timeout=None):
        '''
        Deleting a cluster cannot be undone and stops all traffic routed
        through it.
        '''
        self.log.debug(
            'delete_virtual_dns: scope=%r, id=%s', scope, virtual_dns_id
        )
        self._delete_virtual_dns(scope.item_path(virtual_dns_id), timeout)

    def _delete_virtual_dns(self, uri, timeout):
        res = self._client.make_request('DELETE', uri, None, timeout=timeout)
        self._decode(res, _optional_virtual_dns)

    def virtual_dns_analytics(
        self, scope: Scope, virtual_dns_id, options=None, timeout=None
    ):
        self.log.debug(
            'virtual_dns_analytics: scope=%r, id=%s, options=%s',
            scope,
            virtual_dns_id,
            options,
        )
        uri = scope.analytics_path(virtual_dns_id, options)
        return self._virtual_dns_analytics(uri, timeout)

    def _virtual_dns_analytics(self, uri, timeout):
        res = self._client.make_request('GET', uri, None, timeout=timeout)
        return self._decode(res, VirtualDNSAnalytics.from_dict)

    # --- User scope --------------------------------------------------------

    def create_user_virtual_dns(self, v, timeout=None):
        return self.create_virtual_dns(UserScope(), v, timeout=timeout)

    def user_virtual_dns(self, virtual_dns_id, timeout=None):
        return self.virtual_dns(UserScope(), virtual_dns_id, timeout=timeout)

    def list_user_virtual_dns(self, timeout=None):
        return self.list_virtual_dns(UserScope(), timeout=timeout)

    def update_user_virtual_dns(self, virtual_dns_id, v, timeout=None):
        self.update_virtual_dns(
            UserScope(), virtual_dns_id, v, timeout=timeout
        )

    def delete_user_virtual_dns(self, virtual_dns_id, timeout=None):
        self.delete_virtual_dns(UserScope(), virtual_dns_id, timeout=timeout)

    def user_virtual_dns_analytics(
        self, virtual_dns_id, options=None, timeout=None
    ):
        return self.virtual_dns_analytics(
            UserScope(), virtual_dns_id, options, timeout=timeout
        )

    # --- Organization scope ------------------------------------------------

    def create_organization_virtual_dns(
        self, organization_id, v, timeout=None
    ):
        return self.create_virtual_dns(
            OrganizationScope(organization_id), v, timeout=timeout
        )

    def organization_virtual_dns(
        self, organization_id, virtual_dns_id, timeout=None
    ):
        return self.virtual_dns(
            OrganizationScope(organization_id), virtual_dns_id, timeout=timeout
        )

    def list_organization_virtual_dns(self, organization_id, timeout=None):
        return self.list_virtual_dns(
            OrganizationScope(organization_id), timeout=timeout
        )

    def update_organization_virtual_dns(
        self, organization_id, virtual_dns_id, v, timeout=None
    ):
        self.update_virtual_dns(
            OrganizationScope(organization_id),
            virtual_dns_id,
            v,
            timeout=timeout,
        )

    def delete_organization_virtual_dns(
        self, organization_id, virtual_dns_id, timeout=None
    ):
        self.delete_virtual_dns(
            OrganizationScope(organization_id), virtual_dns_id, timeout=timeout
        )

    def organization_virtual_dns_analytics(
        self, organization_id, virtual_dns_id, options=None, timeout=None
    ):
        return self.virtual_dns_analytics(
            OrganizationScope(organization_id),
            virtual_dns_id,
            options,
            timeout=timeout,
        )
