"""geocv registries.

These registries replace factory if/else sprawl. The core idea is:
- add a new implementation
- register it
- the rest of the system stays closed for modification
"""

from .grouping import list_grouping_strategies, make_clusterer, register_grouping_strategy
from .models import list_model_algos, make_model_builder, register_model_builder
