# ann/src/azuraforge_ann/config.py
"""
Ağ ve eğitim konfigürasyonu için Pydantic modelleri.
"""
import logging
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, Field, NonNegativeFloat, PositiveFloat, PositiveInt, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class TrainOptions(BaseModel):
    """Eğitim döngüsünün parametreleri. Hiçbiri için varsayılan değer yoktur."""
    batch_size: PositiveInt
    max_epochs: PositiveInt
    alpha: PositiveFloat
    max_error: NonNegativeFloat


class NetworkConfig(BaseModel):
    layers: List[PositiveInt] = Field(min_length=2)
    range: PositiveFloat = 0.05
    seed: Optional[int] = None


def _validate(model: Type[ModelT], raw: Union[ModelT, Dict[str, Any]]) -> ModelT:
    """Gelen konfigürasyonu verilen Pydantic modeline göre doğrular."""
    if isinstance(raw, model):
        return raw
    try:
        return model(**raw)
    except ValidationError as e:
        logging.getLogger(model.__name__).error(f"Config validation failed: {e}")
        error_details = "\n".join(
            [f"  - Field '{'.'.join(str(loc) for loc in err['loc'])}': {err['msg']}" for err in e.errors()]
        )
        raise ValueError(f"Invalid configuration for {model.__name__}:\n{error_details}") from e


def validate_options(options: Union[TrainOptions, Dict[str, Any]]) -> TrainOptions:
    return _validate(TrainOptions, options)


def validate_network_config(config: Union[NetworkConfig, Dict[str, Any]]) -> NetworkConfig:
    return _validate(NetworkConfig, config)
