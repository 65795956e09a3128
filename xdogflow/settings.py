"""Parameters of the stylisation pipeline, with their defaults and limits."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from typing import Any, Tuple


def _choice(default: str, *choices: str) -> Any:
    return field(default=default, metadata={"choices": choices})


def _number(default: float, lo: float, hi: float) -> Any:
    return field(default=default, metadata={"range": (lo, hi), "kind": float})


def _integer(default: int, lo: int, hi: int) -> Any:
    return field(default=default, metadata={"range": (lo, hi), "kind": int})


def _flag(default: bool) -> Any:
    return field(default=default, metadata={"kind": bool})


def tau_to_p(tau: float, epsilon: float, phi: float) -> Tuple[float, float, float]:
    """Convert ``(tau, epsilon, phi)`` to the reparameterised ``(p, epsilon_p, phi_p)``."""
    if tau == 1:
        raise ValueError("tau of 1 has no equivalent sharpness p")
    scale = 1 - tau
    return tau / scale, epsilon / scale, phi * scale


def p_to_tau(p: float, epsilon_p: float, phi_p: float) -> Tuple[float, float, float]:
    """Convert ``(p, epsilon_p, phi_p)`` back to ``(tau, epsilon, phi)``."""
    if p == -1:
        raise ValueError("p of -1 has no equivalent tau")
    scale = 1 + p
    return p / scale, epsilon_p / scale, phi_p * scale


@dataclass
class Settings:
    """Every tunable of the edge and fill pipeline.

    Choice fields hold one of a fixed set of names; numeric fields have an
    inclusive range. :meth:`validate` checks both.
    """

    output: str = _choice("edges", "edges", "fill", "fill+edges")
    input_gamma: str = _choice("linear-rgb", "srgb", "linear-rgb")

    st_type: str = _choice(
        "scharr-lab",
        "central-diff", "sobel-rgb", "sobel-lab", "sobel-L", "scharr-rgb",
        "scharr-lab", "gaussian-deriv", "etf-full", "etf-xy",
    )
    sigma_c: float = _number(2.28, 0, 20)
    precision_sigma_c: float = _number(math.sqrt(-2 * math.log(0.05)), 1, 10)
    etf_n: int = _integer(3, 0, 10)

    enable_bf: bool = _flag(False)
    filter_type: str = _choice("xy", "oa", "xy", "fbl", "full")
    n_e: int = _integer(1, 0, 20)
    n_a: int = _integer(4, 0, 20)
    sigma_dg: float = _number(3.0, 0, 20)
    sigma_dt: float = _number(3.0, 0, 20)
    sigma_rg: float = _number(4.25, 0, 100)
    sigma_rt: float = _number(4.25, 0, 100)
    bf_alpha: float = _number(0.0, 0, 10000)
    precision_g: float = _number(2.0, 1, 10)
    precision_t: float = _number(2.0, 1, 10)

    dog_type: str = _choice("flow-based", "isotropic", "flow-based")
    sigma_e: float = _number(1.4, 0, 20)
    dog_k: float = _number(1.6, 1, 10)
    precision_e: float = _number(3.0, 1, 5)
    sigma_m: float = _number(4.4, 0, 20)
    precision_m: float = _number(2.0, 1, 5)
    step_m: float = _number(1.0, 0.01, 2)
    dog_adj_func: str = _choice("smoothstep", "smoothstep", "tanh")
    dog_reparam: bool = _flag(True)
    dog_eps: float = _number(3.50220, -100, 100)
    dog_tau: float = _number(0.95595, 0, 2)
    dog_phi: float = _number(0.3859, 0, 1e32)
    dog_p: float = _number(21.7, 0, 1e6)
    dog_eps_p: float = _number(79.5, -1e32, 1e32)
    dog_phi_p: float = _number(0.017, -1e32, 1e32)
    dog_fgauss: str = _choice("euler", "euler", "rk2-nn", "rk2", "rk4")

    quantization: bool = _flag(False)
    quant_type: str = _choice("adaptive", "fixed", "adaptive")
    nbins: int = _integer(8, 1, 255)
    phi_q: float = _number(2.0, 0, 100)
    lambda_delta: float = _number(0.0, 0, 100)
    omega_delta: float = _number(2.0, 0, 100)
    lambda_phi: float = _number(0.9, 0, 100)
    omega_phi: float = _number(1.6, 0, 100)

    warp_sharp: bool = _flag(False)
    sigma_w: float = _number(1.5, 0, 20)
    precision_w: float = _number(2.0, 1, 5)
    phi_w: float = _number(2.7, 0, 100)

    final_smooth: bool = _flag(True)
    final_type: str = _choice("flow-nearest", "3x3", "5x5", "flow-nearest", "flow-linear")
    sigma_a: float = _number(1.0, 0, 10)

    def validate(self) -> None:
        """Raise ``ValueError`` or ``TypeError`` for any field outside its limits."""
        for f in fields(self):
            value = getattr(self, f.name)
            choices = f.metadata.get("choices")
            if choices is not None:
                if value not in choices:
                    raise ValueError(
                        f"{f.name} must be one of {', '.join(choices)}, not {value!r}"
                    )
                continue
            kind = f.metadata.get("kind")
            if kind is bool:
                if not isinstance(value, bool):
                    raise TypeError(f"{f.name} must be a bool, not {value!r}")
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{f.name} must be a number, not {value!r}")
            if kind is int and not isinstance(value, int):
                raise TypeError(f"{f.name} must be an integer, not {value!r}")
            lo, hi = f.metadata["range"]
            if not lo <= value <= hi:
                raise ValueError(f"{f.name} must lie in [{lo}, {hi}], not {value!r}")

    def sync_dog(self) -> None:
        """Bring the inactive thresholding parameters in line with the active ones.

        With ``dog_reparam`` off, ``dog_p``, ``dog_eps_p`` and ``dog_phi_p``
        follow from ``dog_tau``, ``dog_eps`` and ``dog_phi``; with it on, the
        other way round.
        """
        if not self.dog_reparam:
            self.dog_p, self.dog_eps_p, self.dog_phi_p = tau_to_p(
                self.dog_tau, self.dog_eps, self.dog_phi
            )
        else:
            self.dog_tau, self.dog_eps, self.dog_phi = p_to_tau(
                self.dog_p, self.dog_eps_p, self.dog_phi_p
            )