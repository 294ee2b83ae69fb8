"""Infrastructure layer: concrete implementations of application ports."""

from egphone.infrastructure.phone import PhonenumbersParser

__all__ = ["PhonenumbersParser"]
