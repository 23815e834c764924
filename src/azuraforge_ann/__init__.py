# ann/src/azuraforge_ann/__init__.py
"""
AzuraForge ANN kütüphanesinin ana paketi.
Tam bağlantılı ağ, eğitim döngüsü ve yardımcı bileşenleri dışa aktarır.
"""
from .backend import DEVICE, xp, scope
from .events import Event
from .callbacks import Callback, ProgressLogger, ErrorHistory
from .config import TrainOptions, NetworkConfig, validate_options, validate_network_config
from .losses import Loss, ScaledRootSumSquaredError, calculate_error
from .activations import sigmoid, sigmoid_derivative
from .learner import Learner
from .network import Network


__all__ = [
    "DEVICE", "xp", "scope",
    "Event", "Callback", "ProgressLogger", "ErrorHistory",
    "TrainOptions", "NetworkConfig", "validate_options", "validate_network_config",
    "Loss", "ScaledRootSumSquaredError", "calculate_error",
    "sigmoid", "sigmoid_derivative",
    "Learner",
    "Network",
]
