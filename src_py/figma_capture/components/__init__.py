from .linker import link_component

__all__ = ["link_component"]
