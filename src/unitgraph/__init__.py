"""
unitgraph
GraphQL tutorial server with unit-converting field resolvers
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
