"""
hofkit.tutorial - Who can drive?

The worked example used throughout the hofkit docs: given a list of people,
find the names of those old enough to drive and hand them to a sink.

    >>> people = [Person("John", 17), Person("Jane", 15)]
    >>> driver_names(people)
    ['John']
"""

from dataclasses import dataclass

from hofkit.core import bind_args, cycle_args, filter_seq, for_each, join_fns, map_seq

MINIMUM_AGE_TO_DRIVE = 17


@dataclass(frozen=True)
class Person:
    name: str
    age: int


def can_drive(person: Person) -> bool:
    return person.age >= MINIMUM_AGE_TO_DRIVE


def get_name(person: Person) -> str:
    return person.name


# filter_seq and map_seq take the data first, so cycle_args moves it last
# and bind_args fills in the behaviour argument.
driver_names = join_fns(
    bind_args(cycle_args(filter_seq), can_drive),
    bind_args(cycle_args(map_seq), get_name),
)


def print_drivers(people, sink):
    """Send the name of every person who can drive to sink, in order."""
    return for_each(driver_names(people), sink)
