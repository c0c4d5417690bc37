from flappy_dragon.data_models import Obstacle, Player


def test_no_collision_outside_obstacle_column():
    obstacle = Obstacle(x=80, gap_y=25, size=4)
    for y in range(0, 60):
        assert not obstacle.collides_with(Player(x=79, y=y))
        assert not obstacle.collides_with(Player(x=81, y=y))


def test_no_collision_inside_gap():
    obstacle = Obstacle(x=80, gap_y=25, size=4)
    for y in (24, 25, 26):
        assert not obstacle.collides_with(Player(x=80, y=y))


def test_gap_boundary_rows_are_not_collidable():
    obstacle = Obstacle(x=80, gap_y=25, size=4)
    assert not obstacle.collides_with(Player(x=80, y=23))
    assert not obstacle.collides_with(Player(x=80, y=27))


def test_collision_strictly_outside_gap():
    obstacle = Obstacle(x=80, gap_y=25, size=4)
    assert obstacle.collides_with(Player(x=80, y=22))
    assert obstacle.collides_with(Player(x=80, y=28))
    assert obstacle.collides_with(Player(x=80, y=0))


def test_odd_size_uses_integer_half():
    obstacle = Obstacle(x=3, gap_y=20, size=5)
    assert obstacle.half_size == 2
    assert not obstacle.collides_with(Player(x=3, y=18))
    assert obstacle.collides_with(Player(x=3, y=17))
