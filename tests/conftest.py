#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import warnings

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def strict_warnings():
    """Turn any warning raised inside the test into an error."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        yield
