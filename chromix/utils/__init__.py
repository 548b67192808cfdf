from .num_utils import round_half_away, is_unit

__all__ = ["round_half_away", "is_unit"]
