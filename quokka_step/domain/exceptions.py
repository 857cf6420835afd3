from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""

    code = "domain_error"


class UpstreamFetchError(DomainError):
    """A remote call failed before a usable payload was obtained."""

    code = "upstream_error"

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class UpstreamNetworkError(UpstreamFetchError):
    """Transport failure or 5xx response."""

    code = "upstream_network"


class UpstreamClientError(UpstreamFetchError):
    """4xx response or structurally invalid payload."""

    code = "upstream_client"


class PoolMetricValidationError(DomainError):
    """Pool payload is well formed but misses required fields or breaks invariants."""

    code = "pool_metric_validation"


class PoolInfoInputError(DomainError):
    """Invalid parameters for a pool info lookup."""

    code = "pool_info_input"


class LiquidityConfigInputError(DomainError):
    """Invalid parameters for liquidity config generation."""

    code = "liquidity_config_input"


class LiquidityConfigGenerationError(DomainError):
    """The structured generation call failed or returned an unusable config."""

    code = "liquidity_config_generation"
