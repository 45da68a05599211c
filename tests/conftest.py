#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from scaler.formatter import Formatter
from scaler.options import Scaling


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def formatter() -> Formatter:
    """Formatter with default options: decimal scaling, 4 significant digits, "." and "," separators."""
    return Formatter()


@pytest.fixture
def binary_formatter() -> Formatter:
    """Default formatter with binary IEC scaling."""
    return Formatter().set_scaling(Scaling.binary())


@pytest.fixture
def plain_formatter() -> Formatter:
    """Default formatter without scaling."""
    return Formatter().set_scaling(Scaling.none())
