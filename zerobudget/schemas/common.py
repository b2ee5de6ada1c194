from typing import Annotated

from pydantic import Field

MonthKey = Annotated[str, Field(pattern=r"^\d{4}-(0[1-9]|1[0-2])$", examples=["2024-03"])]
DateStr = Annotated[str, Field(pattern=r"^\d{4}-\d{2}-\d{2}$", examples=["2024-03-15"])]
