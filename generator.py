import random
from dataclasses import asdict, dataclass, replace
from datetime import datetime

from utils import random_date, random_date_di, random_element, unique

FIRST_NAMES = ("Alice", "Bob", "Charlie", "Diana", "Ethan", "Fiona", "George", "Hana")
LAST_NAMES = ("Smith", "Johnson", "Kobayashi", "Garcia", "Brown", "Lee", "Ivanov", "Tanaka")
SEXES = ("male", "female", "non-binary")
TAGS_POOL = ("tech", "gaming", "art", "finance", "travel", "music", "sports")

BIRTHDAY_START = datetime(1970, 1, 1)
BIRTHDAY_END = datetime(2005, 12, 31)

# DianaDB variant picks one of these two instants
DI_BIRTHDAYS = (datetime(1990, 4, 21), datetime(2005, 12, 18))

MAX_TAGS = 4


@dataclass(frozen=True)
class UserRecord:
    name: str
    sex: str
    birthday: object
    tags: tuple

    def to_document(self):
        doc = asdict(self)
        doc["tags"] = list(self.tags)
        return doc


def generate_user(rng=random):
    name = f"{random_element(FIRST_NAMES, rng)} {random_element(LAST_NAMES, rng)}"
    sex = random_element(SEXES, rng)
    birthday = random_date(BIRTHDAY_START, BIRTHDAY_END, rng)
    k = rng.randint(1, MAX_TAGS)
    tags = unique(random_element(TAGS_POOL, rng) for _ in range(k))
    return UserRecord(name=name, sex=sex, birthday=birthday, tags=tags)


def generate_user_di(rng=random):
    user = generate_user(rng)
    start, end = DI_BIRTHDAYS
    return replace(user, birthday=random_date_di(start.isoformat(), end.isoformat(), rng))


def generate_users(count, factory=generate_user, rng=random):
    return [factory(rng) for _ in range(count)]
