from .implementation import AdapterImplementation

__all__ = ["AdapterImplementation"]
