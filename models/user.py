# models/user.py
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict

# A form key sent more than once keeps every value
FormValue = Union[str, List[str]]

# Validation order matters: the first missing field is the one reported.
REQUIRED_FIELDS = (
    "country", "city", "course", "proficiency",
    "fullName", "fatherName", "email", "cnic",
    "phone", "dob", "gender", "qualification", "hasLaptop",
)


class UserRecord(BaseModel):
    # unknown form fields are kept as-is (open schema)
    model_config = ConfigDict(extra="allow")

    id: str

    country: FormValue
    city: FormValue
    course: FormValue
    proficiency: FormValue
    fullName: FormValue
    fatherName: FormValue
    email: FormValue
    cnic: FormValue
    phone: FormValue
    dob: FormValue
    gender: FormValue
    qualification: FormValue
    hasLaptop: FormValue

    fatherNic: Optional[FormValue] = None

    # set from the media upload result
    imageUrl: str
    imagePublicId: str

    createdAt: str

    def to_dict(self) -> dict:
        """Plain dict including any extra fields, ready for JSON."""
        return self.model_dump()
