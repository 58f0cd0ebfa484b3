#
#
#

"""Ownership scopes for Virtual DNS clusters.

A cluster lives either under the current user or under an
organization/account. Each scope resolves to the URL namespace of the
resource so a single implementation per operation can serve both.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import VirtualDNSUserAnalyticsOptions


@runtime_checkable
class Scope(Protocol):
    """Protocol for Virtual DNS URL namespaces."""

    def collection_path(self) -> str:
        """Path of the cluster collection, e.g. ``/user/virtual_dns``."""
        ...

    def item_path(self, virtual_dns_id: str) -> str:
        """Path of a single cluster."""
        ...

    def analytics_path(
        self,
        virtual_dns_id: str,
        options: Optional[VirtualDNSUserAnalyticsOptions] = None,
    ) -> str:
        """Path and query string of a cluster's analytics report."""
        ...


class _BaseScope:
    def collection_path(self) -> str:
        raise NotImplementedError()

    def item_path(self, virtual_dns_id: str) -> str:
        return f'{self.collection_path()}/{virtual_dns_id}'

    def analytics_path(
        self,
        virtual_dns_id: str,
        options: Optional[VirtualDNSUserAnalyticsOptions] = None,
    ) -> str:
        path = f'{self.item_path(virtual_dns_id)}/dns_analytics/report'
        query = options.encode() if options is not None else ''
        if query:
            path = f'{path}?{query}'
        return path


class UserScope(_BaseScope):
    """Clusters owned by the authenticated user."""

    def collection_path(self) -> str:
        return '/user/virtual_dns'

    def __eq__(self, other):
        return isinstance(other, UserScope)

    def __hash__(self):
        return hash(UserScope)

    def __repr__(self):
        return 'UserScope()'


class OrganizationScope(_BaseScope):
    """Clusters owned by an organization/account."""

    def __init__(self, organization_id: str):
        self.organization_id = organization_id

    def collection_path(self) -> str:
        return f'/accounts/{self.organization_id}/virtual_dns'

    def __eq__(self, other):
        return (
            isinstance(other, OrganizationScope)
            and self.organization_id == other.organization_id
        )

    def __hash__(self):
        return hash((OrganizationScope, self.organization_id))

    def __repr__(self):
        return f'OrganizationScope({self.organization_id!r})'
