"""Infrastructure layer for synthetic outreach analytics.

Re-exports configuration and dict/JSON/YAML serialization::

    from synthetic_outreach.infrastructure import (
        GeneratorConfig, SummaryConfig, load_config_file, to_json,
    )

The dashboard CSV codec depends on the measurement layer and is imported
from its own module, ``synthetic_outreach.infrastructure.csv_codec``.
"""

from synthetic_outreach.infrastructure.config import (
    GeneratorConfig,
    SummaryConfig,
    load_config_file,
    load_config_from_json,
    load_config_from_yaml,
)
from synthetic_outreach.infrastructure.serialization import (
    dataset_from_dict,
    dataset_to_dict,
    deserialize,
    event_from_dict,
    event_to_dict,
    from_json,
    from_yaml,
    serialize,
    to_json,
    to_yaml,
)

__all__ = [
    # Config
    "GeneratorConfig",
    "SummaryConfig",
    "load_config_file",
    "load_config_from_json",
    "load_config_from_yaml",
    # Serialization
    "dataset_from_dict",
    "dataset_to_dict",
    "deserialize",
    "event_from_dict",
    "event_to_dict",
    "from_json",
    "from_yaml",
    "serialize",
    "to_json",
    "to_yaml",
]
