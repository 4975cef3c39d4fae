from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """Base for shapes that travel as camelCase JSON (API bodies and the synced state)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
