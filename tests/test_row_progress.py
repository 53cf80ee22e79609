import pytest

from linesquares.components.row_progress import Continuing, RowFinished, RowProgress


def advance_until_finished(progress: RowProgress, limit: int = 500):
    for count in range(1, limit + 1):
        result = progress.advance()
        if isinstance(result, RowFinished):
            return count, result
    raise AssertionError("row never finished")


def test_idle_row_does_not_move():
    progress = RowProgress()
    assert isinstance(progress.advance(), Continuing)
    assert progress.scale == 0.0


def test_begin_if_idle_seeds_forward_direction_from_zero():
    progress = RowProgress()
    assert progress.begin_if_idle()
    assert progress.direction == 1.0


def test_begin_if_idle_seeds_backward_direction_from_one():
    progress = RowProgress(scale=1.0, committed_scale=1.0)
    assert progress.begin_if_idle()
    assert progress.direction == -1.0


def test_begin_if_idle_ignored_while_animating():
    progress = RowProgress()
    progress.begin_if_idle()
    progress.advance()
    scale = progress.scale
    assert not progress.begin_if_idle()
    assert progress.direction == 1.0
    assert progress.scale == scale


def test_forward_step_snaps_to_one():
    progress = RowProgress()
    progress.begin_if_idle()
    count, result = advance_until_finished(progress)
    assert result.final_scale == 1.0
    assert progress.scale == 1.0
    assert progress.committed_scale == 1.0
    assert progress.direction == 0.0
    # Fast phase moves 0.025 per frame, slow phase 0.0125.
    assert 40 < count <= 80


def test_backward_step_snaps_to_zero():
    progress = RowProgress(scale=1.0, committed_scale=1.0)
    progress.begin_if_idle()
    _, result = advance_until_finished(progress)
    assert result.final_scale == 0.0
    assert progress.scale == 0.0
    assert progress.idle


def test_first_frames_use_fast_rate():
    progress = RowProgress()
    progress.begin_if_idle()
    progress.advance()
    assert progress.scale == pytest.approx(0.025)


def test_scale_stays_bounded_across_many_steps():
    progress = RowProgress()
    for _ in range(6):
        progress.begin_if_idle()
        while not isinstance(progress.advance(), RowFinished):
            assert -1e-9 <= progress.scale <= 1.0 + 1e-9
        assert progress.scale in (0.0, 1.0)
