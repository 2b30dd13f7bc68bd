from __future__ import annotations

import re
from importlib import resources as importlib_resources

from fakegen.config import load_config
from fakegen.generator import Generator
from fakegen.providers.contact import _local_part
from fakegen.utils.text import join


def _gen(language: str = "en", seed: int = 11, fallback: bool = True) -> Generator:
    cfg = load_config(env={}).model_copy(
        update={"language": language, "seed": seed, "fallback": fallback}
    )
    return Generator(cfg)


def _lines(language: str, category: str) -> set[str]:
    res = importlib_resources.files("fakegen").joinpath("data", language, category)
    return set(res.read_text(encoding="utf-8").strip().splitlines())


def test_join_skips_empty_parts() -> None:
    assert join("a", "", "b") == "a b"
    assert join("", "") == ""
    assert join() == ""


def test_names() -> None:
    gen = _gen()
    male = _lines("en", "male_first_names")
    female = _lines("en", "female_first_names")
    assert gen.male_first_name() in male
    assert gen.female_first_name() in female
    assert gen.first_name() in male | female
    assert gen.last_name() in _lines("en", "last_names")
    first, last = gen.full_name().split(" ")
    assert first in male | female
    assert last in _lines("en", "last_names")


def test_french_names_stay_french() -> None:
    gen = _gen("fr")
    assert gen.last_name() in _lines("fr", "last_names")


def test_company_falls_back_to_english() -> None:
    gen = _gen("fr")
    name = gen.company()
    assert any(name.startswith(c + " ") for c in _lines("en", "companies"))


def test_company_without_fallback_is_empty() -> None:
    assert _gen("fr", fallback=False).company() == ""


def test_addresses() -> None:
    gen = _gen()
    assert gen.city() in _lines("en", "cities")
    assert gen.country() in _lines("en", "countries")
    number, street = gen.street_address().split(" ", 1)
    assert number.isdigit() and 1 <= len(number) <= 4
    assert street in _lines("en", "streets")
    assert re.fullmatch(r"\d{5}(-\d{4})?", gen.zip_code())


def test_french_street_address_uses_english_numbers() -> None:
    gen = _gen("fr")
    number, street = gen.street_address().split(" ", 1)
    assert number.isdigit()
    assert street in _lines("fr", "streets")


def test_phone_in_german() -> None:
    phone = _gen("de").phone()
    assert re.fullmatch(r"(0\d{3} \d{7})|(\+49 \d{3} \d{7})", phone)


def test_email_address() -> None:
    for seed in range(10):
        address = _gen("fr", seed=seed).email_address()
        assert re.fullmatch(r"[a-z0-9]+\.[a-z0-9]+@[a-z.]+", address), address


def test_local_part_strips_accents() -> None:
    assert _local_part("Hélène") == "helene"
    assert _local_part("Müller") == "muller"
    assert _local_part("O'Brien") == "obrien"
