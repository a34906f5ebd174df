"""Surface models for segkit.

A model is the collaborator that receives and owns the patches produced
by extruding segments.  ``BaseModel`` is the interface the surface
builders call; ``SurfaceModel`` is the in-memory implementation.

Copyright (c) 2026 segkit contributors
MIT License
"""

from abc import ABC, abstractmethod

from segkit.surfaces import (
    cylinder_patch,
    is_cylinder_patch,
    is_patch,
    is_plane_patch,
    patch_id,
    plane_patch,
)


class BaseModel(ABC):
    """Interface for models that instantiate and register patches.

    Each ``instantiate_*`` method returns the registered patch, or
    ``None`` if the patch could not be created.  A failed call must
    leave the model unmodified.
    """

    @abstractmethod
    def instantiate_cylinder_patch(self, center, radius, start_angle, end_angle,
                                   z_bottom, z_top):
        """Create and register a cylinder patch spanning
        ``[start_angle, end_angle]`` (CCW) and ``[z_bottom, z_top]``."""

    @abstractmethod
    def instantiate_plane_patch(self, corners):
        """Create and register a planar patch bounded by four corners."""

    def checkpoint(self):
        raise NotImplementedError(f"{type(self).__name__} does not support rollback")

    def rollback(self, mark):
        raise NotImplementedError(f"{type(self).__name__} does not support rollback")


class SurfaceModel(BaseModel):
    """In-memory model holding an ordered list of patches.

    ``checkpoint()`` and ``rollback()`` let callers that register several
    patches undo a partially complete batch.
    """

    def __init__(self):
        self.surfaces = []
        self._index = {}  # id -> patch

    def instantiate_cylinder_patch(self, center, radius, start_angle, end_angle,
                                   z_bottom, z_top):
        try:
            surf = cylinder_patch(center, radius,
                                  u_range=(start_angle, end_angle),
                                  v_range=(z_bottom, z_top))
        except ValueError:
            return None
        return self.add(surf)

    def instantiate_plane_patch(self, corners):
        try:
            surf = plane_patch(corners)
        except ValueError:
            return None
        return self.add(surf)

    def add(self, surf):
        """Register an already built patch."""
        if not is_patch(surf):
            raise ValueError("Not a patch")
        sid = patch_id(surf)
        if sid in self._index:
            raise ValueError(f"Patch {sid} is already registered")
        self.surfaces.append(surf)
        self._index[sid] = surf
        return surf

    def get(self, sid):
        return self._index.get(sid)

    def checkpoint(self):
        """Return a mark for ``rollback()``."""
        return len(self.surfaces)

    def rollback(self, mark):
        """Remove every patch registered after ``mark``."""
        if mark < 0 or mark > len(self.surfaces):
            raise ValueError(f"Invalid checkpoint {mark}")
        for surf in self.surfaces[mark:]:
            del self._index[patch_id(surf)]
        del self.surfaces[mark:]

    @property
    def cylinders(self):
        return [s for s in self.surfaces if is_cylinder_patch(s)]

    @property
    def planes(self):
        return [s for s in self.surfaces if is_plane_patch(s)]

    def __len__(self):
        return len(self.surfaces)

    def __iter__(self):
        return iter(self.surfaces)


__all__ = [
    'BaseModel',
    'SurfaceModel',
]
