"""Named convenience generators built on :class:`fakegen.generator.Generator`.

Each provider function takes the generator as ``gen`` and combines plain
samples and expanded ``_format`` templates into a realistic looking value.
"""

from .address import city, country, street_address, zip_code
from .company import company
from .contact import email_address, phone
from .person import female_first_name, first_name, full_name, last_name, male_first_name

__all__ = [
    "city",
    "company",
    "country",
    "email_address",
    "female_first_name",
    "first_name",
    "full_name",
    "last_name",
    "male_first_name",
    "phone",
    "street_address",
    "zip_code",
]
