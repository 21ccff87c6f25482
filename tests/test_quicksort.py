import random
from dataclasses import dataclass

import pytest

from algokit.quicksort import quicksort


@dataclass
class Student:
    name: str
    age: int


class LowestPicker:
    def randint(self, a, b):
        return a


def test_numbers_from_source():
    nums = [42, 7, 19, 73, 5]
    assert quicksort(nums, lambda a, b: a < b) == sorted(nums)


def test_students_by_age():
    students = [
        Student("Иван", 22),
        Student("Мария", 19),
        Student("Петр", 25),
        Student("Анна", 20),
    ]
    ordered = quicksort(students, lambda a, b: a.age < b.age)
    ages = [s.age for s in ordered]
    assert ages == sorted(ages)
    assert [s.name for s in ordered] == ["Мария", "Анна", "Иван", "Петр"]


def test_default_ordering():
    words = ["pear", "apple", "orange", "banana"]
    assert quicksort(words) == sorted(words)


def test_descending_predicate():
    data = [3, 9, 1, 7, 7, 2]
    assert quicksort(data, lambda a, b: a > b) == sorted(data, reverse=True)


@pytest.mark.parametrize("seed", range(6))
def test_result_independent_of_seed(seed):
    rng = random.Random(seed)
    data = [rng.randint(-100, 100) for _ in range(80)]
    assert quicksort(data, rng=random.Random(seed + 1000)) == sorted(data)


def test_empty_and_single():
    assert quicksort([]) == []
    assert quicksort([1]) == [1]


def test_input_not_modified():
    data = [5, 4, 3]
    quicksort(data)
    assert data == [5, 4, 3]


def test_worst_case_pivots_on_large_sorted_input():
    data = list(range(3000))
    assert quicksort(data, rng=LowestPicker()) == data


def test_many_duplicates():
    data = [2, 1, 2, 1, 2, 1, 2]
    result = quicksort(data, rng=random.Random(3))
    assert result == sorted(data)