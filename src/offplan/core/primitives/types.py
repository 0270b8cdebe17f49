from typing import Annotated

from pydantic import Field

# constrained types
PositiveInt = Annotated[int, Field(ge=0)]
StrictlyPositiveInt = Annotated[int, Field(ge=1)]
PositiveFloat = Annotated[float, Field(ge=0)]
StrictlyPositiveFloat = Annotated[float, Field(gt=0)]
Percent = Annotated[float, Field(ge=0, le=100)]
MonthOfYear = Annotated[int, Field(ge=1, le=12)]
QuarterOfYear = Annotated[int, Field(ge=1, le=4)]
