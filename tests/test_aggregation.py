"""Unit tests for top performers and leaderboards."""

from sleeperdash.aggregation import leaderboards, roster_totals, rostered_player_ids, top_performers
from sleeperdash.models import Snapshot
from sleeperdash.schemas import LeagueUser, Player, PlayerStats, Roster


def make_user(user_id, team_name=None, display_name=None):
    return LeagueUser(
        user_id=user_id,
        display_name=display_name or user_id,
        metadata={'team_name': team_name},
    )


def make_player(player_id, name, team='KC', positions=('QB',)):
    return Player(player_id=player_id, full_name=name, team=team, fantasy_positions=list(positions))


def make_stats(**stats):
    return PlayerStats(stats=stats)


def make_snapshot(users=(), rosters=(), players=None, stats=None):
    return Snapshot(
        users=list(users),
        rosters=list(rosters),
        players=players or {},
        stats=stats or {},
    )


class TestTopPerformers:
    """Tests for the top five individual scorers."""

    def test_sorted_by_points_descending(self):
        """Test rows come back highest pts_ppr first."""
        snapshot = make_snapshot(
            rosters=[Roster(owner_id='u1', players=['1', '2', '3'])],
            players={pid: make_player(pid, f'Player {pid}') for pid in '123'},
            stats={'1': make_stats(pts_ppr=5), '2': make_stats(pts_ppr=25.5), '3': make_stats(pts_ppr=12)},
        )
        rows = top_performers(snapshot)
        assert [row.player_id for row in rows] == ['2', '3', '1']
        assert rows[0].stats.pts_ppr == 25.5

    def test_truncates_to_five(self):
        """Test at most five rows are returned."""
        ids = [str(i) for i in range(8)]
        snapshot = make_snapshot(
            rosters=[Roster(owner_id='u1', players=ids[:4]), Roster(owner_id='u2', players=ids[4:])],
            stats={pid: make_stats(pts_ppr=int(pid)) for pid in ids},
        )
        rows = top_performers(snapshot)
        assert len(rows) == 5
        assert [row.player_id for row in rows] == ['7', '6', '5', '4', '3']

    def test_missing_stats_score_zero(self):
        """Test a player with no stats entry is ranked with 0 points."""
        snapshot = make_snapshot(
            rosters=[Roster(owner_id='u1', players=['1', '2'])],
            players={'1': make_player('1', 'No Stats'), '2': make_player('2', 'Has Stats')},
            stats={'2': make_stats(pts_ppr=3)},
        )
        rows = top_performers(snapshot)
        assert [row.player_id for row in rows] == ['2', '1']
        assert rows[1].stats.pts_ppr == 0

    def test_missing_directory_entry_still_appears(self):
        """Test a player missing from the directory has no name or team."""
        snapshot = make_snapshot(
            rosters=[Roster(owner_id='u1', players=['ghost'])],
            stats={'ghost': make_stats(pts_ppr=30)},
        )
        rows = top_performers(snapshot)
        assert len(rows) == 1
        assert rows[0].player is None
        assert rows[0].name is None
        assert rows[0].team is None
        assert rows[0].position is None
        assert rows[0].stats.pts_ppr == 30

    def test_ties_keep_roster_order(self):
        """Test equal scores keep roster iteration order."""
        snapshot = make_snapshot(
            rosters=[Roster(owner_id='u1', players=['b', 'a']), Roster(owner_id='u2', players=['c'])],
            stats={pid: make_stats(pts_ppr=10) for pid in 'abc'},
        )
        assert [row.player_id for row in top_performers(snapshot)] == ['b', 'a', 'c']

    def test_player_on_two_rosters_counted_twice(self):
        """Test duplicate roster entries are not de-duplicated."""
        snapshot = make_snapshot(
            rosters=[Roster(owner_id='u1', players=['x']), Roster(owner_id='u2', players=['x'])],
            stats={'x': make_stats(pts_ppr=8)},
        )
        assert rostered_player_ids(snapshot) == ['x', 'x']
        assert [row.player_id for row in top_performers(snapshot)] == ['x', 'x']

    def test_unowned_rosters_still_count(self):
        """Test players on rosters without a league member are still ranked."""
        snapshot = make_snapshot(
            rosters=[Roster(owner_id=None, players=['1'])],
            stats={'1': make_stats(pts_ppr=4)},
        )
        assert [row.player_id for row in top_performers(snapshot)] == ['1']

    def test_empty_snapshot(self):
        """Test an empty snapshot has no performers."""
        assert top_performers(Snapshot()) == []


class TestLeaderboards:
    """Tests for per-team leaderboards."""

    def test_single_roster_scenario(self):
        """Test one roster with a scoring player and a player without stats."""
        snapshot = make_snapshot(
            users=[make_user('A', team_name='A')],
            rosters=[Roster(owner_id='A', players=['1', '2'])],
            stats={'1': make_stats(pts_ppr=10, pass_yd=100)},
        )
        boards = leaderboards(snapshot)
        assert [(e.team, e.value) for e in boards['Points']] == [('A', 10)]
        assert [(e.team, e.value) for e in boards['Yards']] == [('A', 100)]
        assert [(e.team, e.value) for e in boards['Touchdowns']] == [('A', 0)]

    def test_categories_in_display_order(self):
        """Test the three categories are always present, in order."""
        assert list(leaderboards(Snapshot())) == ['Points', 'Yards', 'Touchdowns']

    def test_yards_sum_all_types(self):
        """Test yards add passing, rushing and receiving across the roster."""
        snapshot = make_snapshot(
            users=[make_user('u1', team_name='Team One')],
            rosters=[Roster(owner_id='u1', players=['qb', 'rb', 'wr'])],
            stats={
                'qb': make_stats(pass_yd=250, rush_yd=15),
                'rb': make_stats(rush_yd=80, rec_yd=20),
                'wr': make_stats(rec_yd=110),
            },
        )
        assert leaderboards(snapshot)['Yards'][0].value == 475

    def test_unresolved_owner_skipped(self):
        """Test rosters whose owner is not a league member are dropped."""
        snapshot = make_snapshot(
            users=[make_user('u1', team_name='Known')],
            rosters=[
                Roster(owner_id='u1', players=['1']),
                Roster(owner_id='stranger', players=['2']),
                Roster(owner_id=None, players=['3']),
            ],
            stats={pid: make_stats(pts_ppr=5) for pid in '123'},
        )
        boards = leaderboards(snapshot)
        for category in ('Points', 'Yards', 'Touchdowns'):
            assert [e.team for e in boards[category]] == ['Known']

    def test_all_players_count_not_just_starters(self):
        """Test bench players contribute to team totals."""
        snapshot = make_snapshot(
            users=[make_user('u1', team_name='Bench Mob')],
            rosters=[Roster(owner_id='u1', players=['s', 'b'], starters=['s'])],
            stats={'s': make_stats(pts_ppr=10, td=1), 'b': make_stats(pts_ppr=7, td=2)},
        )
        boards = leaderboards(snapshot)
        assert boards['Points'][0].value == 17
        assert boards['Touchdowns'][0].value == 3

    def test_ties_keep_roster_order(self):
        """Test two rosters tied at 20 points keep their input order."""
        snapshot = make_snapshot(
            users=[make_user('u1', team_name='First'), make_user('u2', team_name='Second')],
            rosters=[Roster(owner_id='u1', players=['1']), Roster(owner_id='u2', players=['2'])],
            stats={'1': make_stats(pts_ppr=20), '2': make_stats(pts_ppr=20)},
        )
        points = leaderboards(snapshot)['Points']
        assert [(e.team, e.value) for e in points] == [('First', 20), ('Second', 20)]

    def test_sorted_descending_and_not_truncated(self):
        """Test each category is sorted and keeps every team."""
        users = [make_user(f'u{i}', team_name=f'Team {i}') for i in range(7)]
        rosters = [Roster(owner_id=f'u{i}', players=[str(i)]) for i in range(7)]
        stats = {str(i): make_stats(pts_ppr=i * 1.5, td=6 - i) for i in range(7)}
        boards = leaderboards(make_snapshot(users=users, rosters=rosters, stats=stats))

        points = [e.value for e in boards['Points']]
        assert len(points) == 7
        assert points == sorted(points, reverse=True)
        assert boards['Touchdowns'][0].team == 'Team 0'

    def test_team_name_falls_back_to_display_name(self):
        """Test owners without a team name show their display name."""
        snapshot = make_snapshot(
            users=[make_user('u1', team_name=None, display_name='griffin')],
            rosters=[Roster(owner_id='u1', players=[])],
        )
        assert leaderboards(snapshot)['Points'][0].team == 'griffin'

    def test_player_missing_from_directory_counts(self):
        """Test stats still count for players absent from the directory."""
        snapshot = make_snapshot(
            users=[make_user('u1', team_name='T')],
            rosters=[Roster(owner_id='u1', players=['ghost'])],
            stats={'ghost': make_stats(pts_ppr=12.25)},
        )
        assert leaderboards(snapshot)['Points'][0].value == 12.25

    def test_roster_totals(self):
        """Test per-roster totals across all three categories."""
        snapshot = make_snapshot(stats={'1': make_stats(pts_ppr=1.5, rush_yd=40, td=1)})
        totals = roster_totals(snapshot, Roster(owner_id='u1', players=['1', '1', 'none']))
        assert totals == {'Points': 3.0, 'Yards': 80.0, 'Touchdowns': 2.0}


class TestPurity:
    """Tests that aggregation has no hidden state."""

    def test_repeat_calls_identical(self):
        """Test calling twice on the same snapshot gives equal results."""
        snapshot = make_snapshot(
            users=[make_user('u1', team_name='One'), make_user('u2', team_name='Two')],
            rosters=[Roster(owner_id='u1', players=['1', '2']), Roster(owner_id='u2', players=['3'])],
            players={'1': make_player('1', 'P1')},
            stats={'1': make_stats(pts_ppr=9), '3': make_stats(pts_ppr=11, rec_yd=90)},
        )
        assert top_performers(snapshot) == top_performers(snapshot)
        assert leaderboards(snapshot) == leaderboards(snapshot)
        assert snapshot.rosters[0].players == ['1', '2']
