from .base import ContentStore
from .local import LocalStore
from .space import SpaceStore
from .registry import build_store
