from .bodies import Body
from .world import CollisionPair, World

__all__ = ["Body", "CollisionPair", "World"]
