"""
Diagnostic events raised by the geometry engine.

Conditions that degrade a result without failing it (e.g. a Vincenty solution
that did not converge) are reported as Diagnostic records to a sink
callable instead of being raised. The default sink logs them.
"""

__all__ = ['Diagnostic', 'DiagnosticSink', 'NON_CONVERGENCE', 'log_diagnostic']

from typing import Any, Callable, Dict, NamedTuple

from centerlines.utils.logging import LOGGER, warn_once

NON_CONVERGENCE = 'non_convergence'


class Diagnostic(NamedTuple):
    """A non-fatal event observed while computing geometry"""
    kind: str
    message: str
    context: Dict[str, Any]


DiagnosticSink = Callable[[Diagnostic], None]


def log_diagnostic(diagnostic: Diagnostic) -> None:
    """Default sink; warns once per message and logs the context at DEBUG"""
    warn_once(f'{diagnostic.message} (this warning will not repeat)')
    LOGGER.debug('%s: %s', diagnostic.kind, diagnostic.context)
