# Import order is the run order.
from .seo_verification_tags import SEO_VERIFICATION_TAGS
from .seo_meta_tags import SEO_META_TAGS
from .seo_headings import SEO_HEADINGS
from .seo_images import SEO_IMAGES
from .seo_links import SEO_LINKS
from .seo_structured_data import SEO_STRUCTURED_DATA
from .seo_performance import SEO_PERFORMANCE
from .seo_mobile_friendly import SEO_MOBILE_FRIENDLY

__all__ = [
    "SEO_VERIFICATION_TAGS",
    "SEO_META_TAGS",
    "SEO_HEADINGS",
    "SEO_IMAGES",
    "SEO_LINKS",
    "SEO_STRUCTURED_DATA",
    "SEO_PERFORMANCE",
    "SEO_MOBILE_FRIENDLY",
]
