from akkuea_curation.resources.models import Resource, ResourceFilters, ResourceRequest
from akkuea_curation.resources.store import InMemoryResourceStore, ResourceNotFoundError, ResourceStore

__all__ = [
    "InMemoryResourceStore",
    "Resource",
    "ResourceFilters",
    "ResourceNotFoundError",
    "ResourceRequest",
    "ResourceStore",
]
