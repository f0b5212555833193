from typing import Annotated

from pydantic import Field


# Relative humidity, in percent
HUMIDITY_TYPE = Annotated[float, Field(ge=0, le=100)]
