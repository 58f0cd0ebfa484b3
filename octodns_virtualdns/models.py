#
#
#

"""Value objects for the Virtual DNS (DNS firewall) resource.

Each class maps to one JSON shape of the API. Instances are plain values
owned by the caller; decoding is strict about JSON types so that a response
of the wrong shape never yields a partially populated object.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import urlencode

RFC3339 = '%Y-%m-%dT%H:%M:%SZ'


def _expect_object(data: Any, what: str) -> Dict:
    if not isinstance(data, dict):
        raise ValueError(f'{what}: expected object, got {type(data).__name__}')
    return data


def _str(data: Dict, key: str, default=None):
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f'{key}: expected string, got {value!r}')
    return value


def _bool(data: Dict, key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f'{key}: expected bool, got {value!r}')
    return value


def _int(data: Dict, key: str, default=None, unsigned=False):
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f'{key}: expected integer, got {value!r}')
    if unsigned and value < 0:
        raise ValueError(f'{key}: expected unsigned integer, got {value!r}')
    return value


def _float(data: Dict, key: str) -> Optional[float]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f'{key}: expected number, got {value!r}')
    try:
        return float(value)
    except OverflowError as e:
        raise ValueError(f'{key}: number out of range') from e


def _str_list(data: Dict, key: str, default=None):
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, list) or not all(
        isinstance(v, str) for v in value
    ):
        raise ValueError(f'{key}: expected list of strings, got {value!r}')
    return list(value)


@dataclass
class VirtualDNS:
    """A Virtual DNS (DNS firewall) cluster.

    ``id``, ``virtual_dns_ips`` and ``modified_on`` are assigned by the
    server and left out of request bodies while unset.
    """

    name: str = ''
    origin_ips: List[str] = field(default_factory=list)
    id: Optional[str] = None
    virtual_dns_ips: Optional[List[str]] = None
    minimum_cache_ttl: int = 0
    maximum_cache_ttl: int = 0
    deprecate_any_requests: bool = False
    modified_on: Optional[str] = None
    ecs_fallback: bool = False
    ratelimit: int = 0

    def to_payload(self) -> Dict:
        payload = {}
        if self.id is not None:
            payload['id'] = self.id
        payload['name'] = self.name
        payload['origin_ips'] = (
            list(self.origin_ips) if self.origin_ips is not None else None
        )
        if self.virtual_dns_ips is not None:
            payload['virtual_dns_ips'] = list(self.virtual_dns_ips)
        payload.update(
            {
                'minimum_cache_ttl': self.minimum_cache_ttl,
                'maximum_cache_ttl': self.maximum_cache_ttl,
                'deprecate_any_requests': self.deprecate_any_requests,
            }
        )
        if self.modified_on is not None:
            payload['modified_on'] = self.modified_on
        payload['ecs_fallback'] = self.ecs_fallback
        payload['ratelimit'] = self.ratelimit
        return payload

    @classmethod
    def from_dict(cls, data: Any) -> 'VirtualDNS':
        data = _expect_object(data, 'virtual_dns')
        return cls(
            id=_str(data, 'id'),
            name=_str(data, 'name', ''),
            origin_ips=_str_list(data, 'origin_ips', []),
            virtual_dns_ips=_str_list(data, 'virtual_dns_ips'),
            minimum_cache_ttl=_int(
                data, 'minimum_cache_ttl', 0, unsigned=True
            ),
            maximum_cache_ttl=_int(
                data, 'maximum_cache_ttl', 0, unsigned=True
            ),
            deprecate_any_requests=_bool(data, 'deprecate_any_requests'),
            modified_on=_str(data, 'modified_on'),
            ecs_fallback=_bool(data, 'ecs_fallback'),
            ratelimit=_int(data, 'ratelimit', 0, unsigned=True),
        )


@dataclass
class VirtualDNSAnalyticsMetrics:
    """Aggregated metrics; any value is None when the API has no data."""

    query_count: Optional[int] = None
    uncached_count: Optional[int] = None
    stale_count: Optional[int] = None
    response_time_avg: Optional[float] = None
    response_time_median: Optional[float] = None
    response_time_90th: Optional[float] = None
    response_time_99th: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Any) -> 'VirtualDNSAnalyticsMetrics':
        if data is None:
            return cls()
        data = _expect_object(data, 'metrics')
        return cls(
            query_count=_int(data, 'queryCount'),
            uncached_count=_int(data, 'uncachedCount'),
            stale_count=_int(data, 'staleCount'),
            response_time_avg=_float(data, 'responseTimeAvg'),
            response_time_median=_float(data, 'responseTimeMedian'),
            response_time_90th=_float(data, 'responseTime90th'),
            response_time_99th=_float(data, 'responseTime99th'),
        )


@dataclass
class VirtualDNSAnalytics:
    totals: VirtualDNSAnalyticsMetrics = field(
        default_factory=VirtualDNSAnalyticsMetrics
    )
    min: VirtualDNSAnalyticsMetrics = field(
        default_factory=VirtualDNSAnalyticsMetrics
    )
    max: VirtualDNSAnalyticsMetrics = field(
        default_factory=VirtualDNSAnalyticsMetrics
    )

    @classmethod
    def from_dict(cls, data: Any) -> 'VirtualDNSAnalytics':
        if data is None:
            return cls()
        data = _expect_object(data, 'analytics')
        return cls(
            totals=VirtualDNSAnalyticsMetrics.from_dict(data.get('totals')),
            min=VirtualDNSAnalyticsMetrics.from_dict(data.get('min')),
            max=VirtualDNSAnalyticsMetrics.from_dict(data.get('max')),
        )


def _format_time(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(RFC3339)


@dataclass
class VirtualDNSUserAnalyticsOptions:
    """Time range and metric selection for the analytics report."""

    # a single metric may be passed as a bare string
    metrics: Optional[Sequence[str]] = None
    since: Optional[datetime] = None
    until: Optional[datetime] = None

    def encode(self) -> str:
        """Form-encode the set options, keys sorted, absent keys omitted."""
        params = {}
        if self.since is not None:
            params['since'] = _format_time(self.since)
        if self.until is not None:
            params['until'] = _format_time(self.until)
        metrics = self.metrics
        if isinstance(metrics, str):
            metrics = [metrics]
        if metrics:
            params['metrics'] = ','.join(metrics)
        return urlencode(sorted(params.items()))
