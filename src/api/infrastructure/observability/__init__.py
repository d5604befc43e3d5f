"""Domain-oriented observability for shared infrastructure.

Domain probes encapsulate instrumentation details and provide a
domain-focused API for observability.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from infrastructure.observability.probes import (
    BrokerProbe,
    DatabaseProbe,
    DefaultBrokerProbe,
    DefaultDatabaseProbe,
)

__all__ = [
    "BrokerProbe",
    "DatabaseProbe",
    "DefaultBrokerProbe",
    "DefaultDatabaseProbe",
]
