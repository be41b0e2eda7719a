import numpy as np

from pydantic import BaseModel, ConfigDict, Field


CORNERS_PER_BLOB = 8
MAX_BLOBS_PER_GROUP = 256
MAX_POINTS_PER_HULL = MAX_BLOBS_PER_GROUP * CORNERS_PER_BLOB

# single-precision machine epsilon, the tolerance of every geometric predicate
EPSILON = float(np.finfo(np.float32).eps)


class HullConfig(BaseModel):
    """
    Sizing and tolerance of a hull point set and its scratch stack.
    """
    model_config = ConfigDict(frozen=True)

    capacity: int = Field(default=MAX_POINTS_PER_HULL, gt=0)
    epsilon: float = Field(default=EPSILON, gt=0)


DEFAULT_CONFIG = HullConfig()
