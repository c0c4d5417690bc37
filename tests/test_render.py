from flappy_dragon.constants import BLACK
from flappy_dragon.render import Clear, PrintCentered, PrintText, SetGlyph, TickContext


def test_context_records_directives_in_order():
    ctx = TickContext(frame_time_ms=16.0)
    ctx.cls()
    ctx.set(1, 2, (1, 1, 1), (0, 0, 0), "@")
    ctx.print(0, 0, "hello")
    ctx.print_centered(5, "world")

    assert ctx.commands == [
        Clear((0, 0, 0)),
        SetGlyph(1, 2, (1, 1, 1), (0, 0, 0), "@"),
        PrintText(0, 0, "hello"),
        PrintCentered(5, "world"),
    ]
    assert ctx.texts() == ["hello", "world"]
    assert not ctx.quitting


def test_cls_defaults_to_black():
    ctx = TickContext()
    ctx.cls()
    assert ctx.commands == [Clear(BLACK)]
