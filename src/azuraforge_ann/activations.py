from .backend import xp


def sigmoid(x):
    """Lojistik sigmoid aktivasyonu, eleman bazında."""
    return 1 / (1 + xp.exp(-x))


def sigmoid_derivative(out):
    """
    Sigmoid türevini, zaten hesaplanmış çıktı üzerinden verir: (1 - out) * out.
    Aktivasyon öncesi değerler saklanmadığı için sigmoid yeniden hesaplanmaz.
    """
    return (1 - out) * out
