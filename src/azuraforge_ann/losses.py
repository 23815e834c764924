import math

from .backend import xp


class Loss:
    """Tüm hata ölçütlerinin miras alacağı soyut temel sınıf."""
    def __call__(self, out, pred) -> float:
        raise NotImplementedError


class ScaledRootSumSquaredError(Loss):
    """
    Farkların kareler toplamının karekökü, eleman sayısına bölünür:
    sqrt(sum((out - pred)^2)) / out.size

    Bölme karekökten sonra yapılır; yani bu gerçek RMS değildir.
    """
    def __call__(self, out, pred) -> float:
        dif = out - pred
        sq = dif * dif
        return math.sqrt(float(xp.sum(sq))) / sq.size


def calculate_error(out, pred) -> float:
    return ScaledRootSumSquaredError()(out, pred)
