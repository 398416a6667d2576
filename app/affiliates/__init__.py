from app.affiliates.models import AffiliateCategory, AffiliateLinkRequest, AffiliatePartner
from app.affiliates.partners import load_partners
from app.affiliates.selector import AffiliateLinkSelector

__all__ = [
    "AffiliateCategory",
    "AffiliateLinkRequest",
    "AffiliateLinkSelector",
    "AffiliatePartner",
    "load_partners",
]
