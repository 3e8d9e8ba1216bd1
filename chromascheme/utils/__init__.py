from .dimension import get_dimension
from .num_utils import remap, default_range, is_bounds_pair
