"""
Timing Synthesizer
Splits one measured duration into fixed shares per phase. Nothing here is
measured per phase; only the total comes from the wire.
"""

from .models import Exchange, PhaseBreakdown, RequestSpec

DNS_SHARE = 0.05
CONNECT_SHARE = 0.15
SSL_SHARE = 0.25
PROCESSING_SHARE = 0.50
TRANSFER_SHARE = 0.05


def synthesize(spec: RequestSpec, exchange: Exchange) -> PhaseBreakdown:
    """Build the phase breakdown for a finished exchange."""
    total = exchange.elapsed_ms
    body = "" if spec.is_head else exchange.body

    # total is the measured value, not the sum of the phases
    return PhaseBreakdown(
        dns=total * DNS_SHARE,
        connect=total * CONNECT_SHARE,
        ssl=total * SSL_SHARE if spec.is_https else 0.0,
        processing=total * PROCESSING_SHARE,
        transfer=0.0 if spec.is_head else total * TRANSFER_SHARE,
        total=total,
        response_size_bytes=len(body.encode("utf-8")),
    )
