# ABOUTME: Converts a wind bearing in degrees to a 16-point compass label.
# ABOUTME: Each label covers a 22.5 degree sector centred on its compass point.

import math

from owm.errors import InvalidArgumentError

# Upper bound (inclusive) of each sector, in ascending order
_SECTORS = (
    (11.25, "N"),
    (33.75, "NNE"),
    (56.25, "NE"),
    (78.75, "ENE"),
    (101.25, "E"),
    (123.75, "ESE"),
    (146.25, "SE"),
    (168.75, "SSE"),
    (191.25, "S"),
    (213.75, "SSW"),
    (236.25, "SW"),
    (258.75, "WSW"),
    (281.25, "W"),
    (303.75, "WNW"),
    (326.25, "NW"),
    (348.75, "NNW"),
)


def degree_to_direction(degree: float) -> str:
    """Return the compass label for a bearing between 0 and 360 degrees.

    A bearing exactly on a sector boundary belongs to the lower sector.

    Raises:
        InvalidArgumentError: If degree is NaN or outside [0, 360].
    """
    if math.isnan(degree) or degree < 0.0 or degree > 360.0:
        raise InvalidArgumentError(f"Degree must be between 0 and 360, got {degree}")

    for upper, label in _SECTORS:
        if degree <= upper:
            return label
    return "N"
