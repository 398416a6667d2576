from __future__ import annotations

import logging
import string
from collections.abc import Iterable
from typing import Final
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

from app.affiliates.models import AffiliateLinkRequest, AffiliatePartner

logger = logging.getLogger(__name__)

TEMPLATE_FIELDS: Final[frozenset[str]] = frozenset({"destination", "vertical", "category"})
_FORMATTER = string.Formatter()


def template_fields(template: str) -> set[str]:
    """Return the placeholders a URL template uses.

    Raises:
        ValueError: If the template is malformed or uses an unsupported placeholder
    """
    fields: set[str] = set()
    for _literal, field_name, format_spec, conversion in _FORMATTER.parse(template):
        if field_name is None:
            continue
        if field_name not in TEMPLATE_FIELDS or format_spec or conversion:
            raise ValueError(f"Unsupported placeholder {{{field_name}}}")
        fields.add(field_name)
    return fields


def _with_tracking(url: str, tracking_params: dict[str, str]) -> str:
    if not tracking_params:
        return url
    parts = urlsplit(url)
    query = parse_qsl(parts.query, keep_blank_values=True)
    query.extend(tracking_params.items())
    return urlunsplit(parts._replace(query=urlencode(query, quote_via=quote)))


def build_partner_url(partner: AffiliatePartner, request: AffiliateLinkRequest) -> str | None:
    """Materialise a partner URL for a request, or None if the partner cannot serve it."""
    values = {
        "destination": request.destination,
        "vertical": request.vertical,
        "category": request.category.value if request.category else None,
    }
    template = partner.url_template
    if request.destination is None and partner.landing_url:
        template = partner.landing_url

    try:
        fields = template_fields(template)
    except ValueError as exc:
        logger.warning(f"Skipping affiliate partner {partner.id}: malformed URL template ({exc})")
        return None

    missing = sorted(field for field in fields if values[field] is None)
    if missing:
        logger.debug("Skipping affiliate partner %s: missing %s", partner.id, ", ".join(missing))
        return None

    url = template.format(**{field: quote(str(values[field]), safe="") for field in fields})
    url = _with_tracking(url, partner.tracking_params)
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        logger.warning(f"Skipping affiliate partner {partner.id}: '{url}' is not an absolute URL")
        return None
    return url


class AffiliateLinkSelector:
    """Picks one affiliate redirect URL from a static partner table.

    Pure over its configuration: no network I/O, no state changes.
    """

    def __init__(self, partners: Iterable[AffiliatePartner]) -> None:
        by_id: dict[str, AffiliatePartner] = {}
        for partner in partners:
            if partner.id in by_id:
                raise ValueError(f"Duplicate affiliate partner id: {partner.id}")
            by_id[partner.id] = partner
        self._by_id = by_id
        self._ranked = tuple(sorted(by_id.values(), key=lambda p: (-p.priority, p.id)))

    @property
    def partners(self) -> tuple[AffiliatePartner, ...]:
        """All partners, highest priority first."""
        return self._ranked

    def get_partner(self, partner_id: str) -> AffiliatePartner | None:
        return self._by_id.get(partner_id)

    def _eligible(self, partner: AffiliatePartner, request: AffiliateLinkRequest) -> bool:
        return (
            partner.enabled
            and partner.allowed_for(request.vertical)
            and partner.supports(request.category)
        )

    def candidates(self, request: AffiliateLinkRequest) -> list[AffiliatePartner]:
        return [partner for partner in self._ranked if self._eligible(partner, request)]

    def get_best_partner(self, request: AffiliateLinkRequest) -> AffiliatePartner | None:
        """Highest-priority eligible partner that can build a URL for the request."""
        for partner in self.candidates(request):
            if build_partner_url(partner, request) is not None:
                return partner
        return None

    def get_enabled_partners_for_vertical(self, vertical: str | None) -> list[AffiliatePartner]:
        return [
            partner
            for partner in self._ranked
            if partner.enabled and partner.allowed_for(vertical)
        ]

    def generate_affiliate_link(
        self, partner_id: str, request: AffiliateLinkRequest
    ) -> str | None:
        """URL for one named partner, ignoring category support."""
        partner = self._by_id.get(partner_id)
        if partner is None or not partner.enabled or not partner.allowed_for(request.vertical):
            return None
        return build_partner_url(partner, request)

    def generate_best_affiliate_link(self, request: AffiliateLinkRequest) -> str | None:
        """Return the best redirect URL for a request, or None when no partner fits.

        A pinned partner wins when it supports the request; otherwise selection
        falls back to the highest-priority eligible partner.
        """
        if request.partner is not None:
            pinned = self._by_id.get(request.partner)
            if pinned is not None and self._eligible(pinned, request):
                url = build_partner_url(pinned, request)
                if url is not None:
                    return url
            logger.info(
                "Pinned affiliate partner %s cannot serve request, selecting automatically",
                request.partner,
            )

        partner = self.get_best_partner(request)
        if partner is None:
            return None
        return build_partner_url(partner, request)
