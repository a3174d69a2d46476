from hira.challenges.leaderboard import challenge_habit, leaderboard_position, medal, rank
from hira.challenges.models import ChallengeRecord
from hira.users.models import UserRecord


def _challenge(participants):
    return ChallengeRecord(
        id="challenge_1",
        name="Walk it off",
        habit_name="Walk",
        participants=participants,
    )


def _users(*ids):
    return [UserRecord(id=i, name=i.title()) for i in ids]


def _owned(make_habit, owner, points, completions=0):
    return make_habit(
        challenge_id="challenge_1",
        owner_id=owner,
        total_points=points,
        completed_dates=["2024-01-01"] * completions,
    )


def test_ties_share_rank_and_next_skips(make_habit):
    challenge = _challenge(["a", "b", "c"])
    habits = [
        _owned(make_habit, "a", 50),
        _owned(make_habit, "b", 50),
        _owned(make_habit, "c", 30),
    ]
    board = rank(challenge, _users("a", "b", "c"), habits)

    assert [e.rank for e in board] == [1, 1, 3]
    assert [e.points for e in board] == [50, 50, 30]


def test_tie_in_the_middle(make_habit):
    challenge = _challenge(["d", "c", "b", "a"])
    habits = [
        _owned(make_habit, "a", 50),
        _owned(make_habit, "b", 40),
        _owned(make_habit, "c", 40),
        _owned(make_habit, "d", 10),
    ]
    board = rank(challenge, _users("a", "b", "c", "d"), habits)

    assert board[0].user_id == "a"
    assert {e.user_id for e in board[1:3]} == {"b", "c"}
    assert board[-1].user_id == "d"
    assert [e.rank for e in board] == [1, 2, 2, 4]


def test_all_equal_share_first(make_habit):
    challenge = _challenge(["a", "b", "c"])
    habits = [_owned(make_habit, u, 5) for u in ("a", "b", "c")]
    assert [e.rank for e in rank(challenge, _users("a", "b", "c"), habits)] == [1, 1, 1]


def test_unknown_participants_are_skipped(make_habit):
    challenge = _challenge(["a", "ghost"])
    board = rank(challenge, _users("a"), [_owned(make_habit, "a", 3)])

    assert len(board) == 1
    assert board[0].user_id == "a"
    assert board[0].display_name == "A"


def test_participant_without_habit_scores_zero():
    board = rank(_challenge(["a"]), _users("a"), [])
    assert board[0].points == 0
    assert board[0].completions == 0
    assert board[0].rank == 1


def test_unowned_habit_is_the_local_users(make_habit):
    challenge = _challenge(["user_1", "b"])
    local = make_habit(challenge_id="challenge_1", total_points=7, completed_dates=["2024-01-01"] * 7)
    habits = [local, _owned(make_habit, "b", 9)]

    assert challenge_habit(challenge, habits, "user_1") is local
    board = rank(challenge, _users("user_1", "b"), habits)
    assert [(e.user_id, e.points, e.completions, e.rank) for e in board] == [
        ("b", 9, 0, 1),
        ("user_1", 7, 7, 2),
    ]


def test_habits_for_other_challenges_ignored(make_habit):
    other = make_habit(challenge_id="challenge_2", total_points=99)
    assert rank(_challenge(["a"]), _users("a"), [other])[0].points == 0


def test_inputs_not_mutated(make_habit):
    challenge = _challenge(["b", "a"])
    users = _users("a", "b")
    habits = [_owned(make_habit, "a", 2), _owned(make_habit, "b", 1)]
    before = (challenge.model_dump(), [u.model_dump() for u in users], [h.model_dump() for h in habits])

    rank(challenge, users, habits)

    assert challenge.participants == ["b", "a"]
    assert before == (challenge.model_dump(), [u.model_dump() for u in users], [h.model_dump() for h in habits])


def test_rank_is_idempotent(make_habit):
    challenge = _challenge(["a", "b"])
    users = _users("a", "b")
    habits = [_owned(make_habit, "a", 4), _owned(make_habit, "b", 4)]
    assert rank(challenge, users, habits) == rank(challenge, users, habits)


def test_leaderboard_position(make_habit):
    challenge = _challenge(["a", "b", "c"])
    users = _users("a", "b", "c")
    habits = [_owned(make_habit, "a", 10), _owned(make_habit, "b", 20)]

    assert leaderboard_position(challenge, "a", users, habits) == (2, 10, 3)
    assert leaderboard_position(challenge, "zed", users, habits) == (0, 0, 3)


def test_medals():
    assert medal(1) == "🥇"
    assert medal(2) == "🥈"
    assert medal(3) == "🥉"
    assert medal(4) is None
