#
# Tests for user and organization URL namespaces
#

from unittest import TestCase

from octodns_virtualdns.models import VirtualDNSUserAnalyticsOptions
from octodns_virtualdns.scopes import OrganizationScope, UserScope


class TestScopes(TestCase):
    def test_user_paths(self):
        scope = UserScope()
        self.assertEqual('/user/virtual_dns', scope.collection_path())
        self.assertEqual('/user/virtual_dns/abc', scope.item_path('abc'))
        self.assertEqual(
            '/user/virtual_dns/abc/dns_analytics/report',
            scope.analytics_path('abc'),
        )

    def test_organization_paths(self):
        scope = OrganizationScope('org1')
        self.assertEqual('/accounts/org1/virtual_dns', scope.collection_path())
        self.assertEqual(
            '/accounts/org1/virtual_dns/abc', scope.item_path('abc')
        )
        self.assertEqual(
            '/accounts/org1/virtual_dns/abc/dns_analytics/report'
            '?metrics=queryCount',
            scope.analytics_path(
                'abc', VirtualDNSUserAnalyticsOptions(metrics=['queryCount'])
            ),
        )

    def test_empty_options_add_no_query(self):
        self.assertEqual(
            '/user/virtual_dns/abc/dns_analytics/report',
            UserScope().analytics_path('abc', VirtualDNSUserAnalyticsOptions()),
        )

    def test_paths_are_distinct(self):
        scopes = [
            UserScope(),
            OrganizationScope('org1'),
            OrganizationScope('org2'),
        ]
        paths = set()
        for scope in scopes:
            for _id in ('a', 'b'):
                paths.add(scope.item_path(_id))
                paths.add(scope.analytics_path(_id))
            paths.add(scope.collection_path())
        self.assertEqual(15, len(paths))

    def test_equality(self):
        self.assertEqual(UserScope(), UserScope())
        self.assertEqual(OrganizationScope('a'), OrganizationScope('a'))
        self.assertNotEqual(OrganizationScope('a'), OrganizationScope('b'))
        self.assertNotEqual(UserScope(), OrganizationScope('a'))
        self.assertEqual(1, len({OrganizationScope('a'), OrganizationScope('a')}))
        self.assertEqual("OrganizationScope('a')", repr(OrganizationScope('a')))
