import json
from datetime import datetime, timedelta, timezone

import pytest

from benchlog.errors import WorkoutFormatError
from benchlog.exercise import Exercise
from benchlog.workout import Workout
from benchlog.workout_set import WorkoutSet
from utils import make_set, make_workout


def test_roundtrip_preserves_every_field():
    workout = Workout(
        id="complex-workout",
        date=datetime(2024, 6, 15, 14, 30, 45, tzinfo=timezone.utc),
        sets=(
            make_set("set-1", Exercise.BENCH_PRESS, 40.5, 10),
            make_set("set-2", Exercise.BENCH_PRESS, 45.0, 8),
            make_set("set-3", Exercise.DEADLIFT, 70.5, 8),
        ),
    )
    restored = Workout.from_json(workout.to_json())
    assert restored == workout
    assert [s.weight for s in restored.sets] == [40.5, 45.0, 70.5]
    assert restored.sets[2].exercise is Exercise.DEADLIFT


def test_roundtrip_without_sets():
    workout = make_workout("empty", sets=[])
    assert Workout.from_json(workout.to_json()) == workout


def test_roundtrip_with_every_exercise():
    workout = make_workout(
        "all",
        sets=[make_set(f"set-{e.token}", e, 20.0 + i, i + 1) for i, e in enumerate(Exercise)],
    )
    restored = Workout.from_json(workout.to_json())
    assert restored == workout
    assert [s.exercise for s in restored.sets] == list(Exercise)


def test_json_shape():
    workout = Workout(
        id="w1",
        date=datetime(2024, 3, 15, 10, 0, tzinfo=timezone.utc),
        sets=(make_set("s1", Exercise.SHOULDER_PRESS, 30, 12),),
    )
    data = json.loads(workout.to_json())
    assert data == {
        "id": "w1",
        "date": "2024-03-15T10:00:00+00:00",
        "sets": [
            {"id": "s1", "exercise": "shoulderPress", "weight": 30, "repetitions": 12}
        ],
    }


def test_date_is_normalised_to_utc():
    plus_two = timezone(timedelta(hours=2))
    workout = make_workout(date=datetime(2024, 3, 15, 12, 0, tzinfo=plus_two))
    assert workout.date == datetime(2024, 3, 15, 10, 0, tzinfo=timezone.utc)
    assert workout.date.tzinfo == timezone.utc
    assert workout.to_dict()["date"] == "2024-03-15T10:00:00+00:00"


def test_naive_date_is_taken_as_utc():
    workout = make_workout(date=datetime(2024, 3, 15, 10, 0))
    assert workout.date == datetime(2024, 3, 15, 10, 0, tzinfo=timezone.utc)


def test_parses_zulu_and_fractional_timestamps():
    data = {"id": "w", "date": "2024-03-15T10:00:00.000Z", "sets": []}
    assert Workout.from_dict(data).date == datetime(2024, 3, 15, 10, tzinfo=timezone.utc)


def test_weight_is_coerced_to_float():
    data = {"id": "s", "exercise": "squat", "weight": 100, "repetitions": 5}
    workout_set = WorkoutSet.from_dict(data)
    assert isinstance(workout_set.weight, float)
    assert workout_set.weight == 100.0


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[]",
        '{"id": "w", "date": "2024-03-15T10:00:00Z"}',
        '{"id": 1, "date": "2024-03-15T10:00:00Z", "sets": []}',
        '{"id": "w", "date": "yesterday", "sets": []}',
        '{"id": "w", "date": "2024-03-15T10:00:00Z", "sets": {}}',
        '{"id": "w", "date": "2024-03-15T10:00:00Z", "sets": ['
        '{"id": "s", "exercise": "curl", "weight": 10, "repetitions": 5}]}',
        '{"id": "w", "date": "2024-03-15T10:00:00Z", "sets": ['
        '{"id": "s", "exercise": "squat", "weight": "heavy", "repetitions": 5}]}',
        '{"id": "w", "date": "2024-03-15T10:00:00Z", "sets": ['
        '{"id": "s", "exercise": "squat", "weight": 10, "repetitions": 5.5}]}',
        '{"id": "w", "date": "2024-03-15T10:00:00Z", "sets": ['
        '{"id": "s", "exercise": "squat", "weight": 10}]}',
        '{"id": "w", "date": "0001-01-01T00:00:00+01:00", "sets": []}',
        '{"id": "w", "date": "2024-03-15T10:00:00Z", "sets": ['
        '{"id": "s", "exercise": "squat", "weight": 1'
        + "0" * 400
        + ', "repetitions": 5}]}',
    ],
)
def test_malformed_records_raise_format_error(text):
    with pytest.raises(WorkoutFormatError):
        Workout.from_json(text)


def test_volume_and_set_count():
    workout = make_workout(
        sets=[
            make_set("a", Exercise.BENCH_PRESS, 50.0, 10),
            make_set("b", Exercise.SQUAT, 100.0, 8),
        ]
    )
    assert workout.set_count == 2
    assert workout.volume == 1300.0
    assert workout.sets[1].volume == 800.0


def test_exercises_in_first_seen_order():
    workout = make_workout(
        sets=[
            make_set("a", Exercise.SQUAT),
            make_set("b", Exercise.BENCH_PRESS),
            make_set("c", Exercise.SQUAT),
        ]
    )
    assert workout.exercises == [Exercise.SQUAT, Exercise.BENCH_PRESS]


def test_with_set_replaced_returns_new_workout():
    original = make_workout(sets=[make_set("a"), make_set("b")])
    replacement = make_set("b", Exercise.DEADLIFT, 80.0, 6)
    updated = original.with_set_replaced(1, replacement)
    assert updated.sets == (original.sets[0], replacement)
    assert original.sets[1].exercise is Exercise.BENCH_PRESS
    assert updated.id == original.id and updated.date == original.date


def test_without_set():
    original = make_workout(sets=[make_set("a"), make_set("b"), make_set("c")])
    assert [s.id for s in original.without_set(1).sets] == ["a", "c"]
    with pytest.raises(IndexError):
        original.without_set(3)
    with pytest.raises(IndexError):
        original.with_set_replaced(-1, make_set("x"))
