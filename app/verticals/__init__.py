from app.verticals.catalog import load_verticals
from app.verticals.models import SHARED_VERTICAL, FeatureIcon, Vertical
from app.verticals.registry import VerticalRegistry

__all__ = ["SHARED_VERTICAL", "FeatureIcon", "Vertical", "VerticalRegistry", "load_verticals"]
