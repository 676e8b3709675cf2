import pytest

from engine import PlaybackController, SPEED_PRESETS, TickScheduler, final_view
from engine.playback import MSG_LOADED, MSG_READY, MSG_RESET


def test_loaded_run_starts_ready(controller):
    view = controller.view()
    assert view.cursor == 0
    assert view.total_steps == 8
    assert view.visible_mst == ()
    assert view.visible_cost == 0
    assert view.message == MSG_LOADED
    assert view.current_step is None
    assert not view.playing


def test_step_forward_shows_next_step(controller, sample_result):
    assert controller.step_forward() is True
    view = controller.view()
    assert view.cursor == 1
    assert view.current_step is sample_result.steps[0]
    assert view.visible_edge_ids == (6,)
    assert view.visible_cost == 1
    assert view.message == "Considering edge (D, E) — added."


def test_step_forward_at_end_is_noop(controller):
    for _ in range(8):
        assert controller.step_forward()
    assert controller.is_complete
    assert controller.step_forward() is False
    assert controller.cursor == 8
    assert controller.view().visible_cost == 21


def test_step_backward_at_start_is_noop(controller):
    assert controller.step_backward() is False
    assert controller.cursor == 0
    assert controller.message == MSG_LOADED


def test_forward_then_back_returns_to_ready(controller):
    for _ in range(8):
        controller.step_forward()
    for _ in range(8):
        assert controller.step_backward()
    view = controller.view()
    assert view.cursor == 0
    assert view.visible_mst == ()
    assert view.visible_cost == 0
    assert view.message == MSG_READY


def test_step_backward_restores_previous_frame(controller, sample_result):
    for _ in range(6):
        controller.step_forward()
    controller.step_backward()
    view = controller.view()
    assert view.current_step is sample_result.steps[4]
    assert view.visible_cost == 15
    assert view.skipped_ids == ()


def test_skipped_ids_accumulate(controller):
    controller.jump_to_end()
    view = controller.view()
    assert view.skipped_ids == (4, 8)
    assert view.is_complete
    assert view.to_dict()["decision"] == "skipped"


def test_reset_from_anywhere(controller):
    controller.goto(5)
    controller.play()
    controller.reset()
    view = controller.view()
    assert view.cursor == 0
    assert not view.playing
    assert view.message == MSG_RESET
    assert not controller.has_pending


def test_goto_out_of_range(controller):
    assert controller.goto(9) is False
    assert controller.goto(-1) is False
    assert controller.cursor == 0


def test_play_advances_on_timer(controller, scheduler, clock):
    assert controller.play() is True
    assert controller.has_pending

    clock.advance(1.5)
    assert scheduler.run_due() == 0
    assert controller.cursor == 0

    clock.advance(0.5)
    assert scheduler.run_due() == 1
    assert controller.cursor == 1
    assert controller.is_playing


def test_autoplay_stops_at_end(controller, scheduler, clock):
    controller.play()
    for _ in range(8):
        clock.advance(2.0)
        scheduler.run_due()
    assert controller.cursor == 8
    assert not controller.is_playing
    assert not controller.has_pending
    assert scheduler.pending() == 0


def test_at_most_one_pending_action(controller, scheduler):
    controller.play()
    controller.play()
    controller.step_forward()
    controller.set_speed(2.0)
    assert scheduler.pending() == 1


def test_play_when_complete_is_noop(controller):
    controller.jump_to_end()
    assert controller.play() is False
    assert not controller.is_playing
    assert not controller.has_pending


def test_pause_cancels_pending_step(controller, scheduler, clock):
    controller.play()
    controller.pause()
    clock.advance(10)
    assert scheduler.run_due() == 0
    assert controller.cursor == 0
    assert not controller.is_playing


def test_toggle_play(controller):
    assert controller.toggle_play() is True
    assert controller.toggle_play() is False


def test_speed_change_reschedules(controller, scheduler, clock):
    controller.play()
    clock.advance(0.5)
    controller.set_speed(2.0)         # next step now 1.0s away
    assert controller.interval == pytest.approx(1.0)
    clock.advance(0.75)
    assert scheduler.run_due() == 0
    clock.advance(0.25)
    assert scheduler.run_due() == 1
    assert controller.cursor == 1


def test_manual_step_while_playing_restarts_timer(controller, scheduler, clock):
    controller.play()
    clock.advance(1.5)
    controller.step_forward()
    clock.advance(1.0)
    assert scheduler.run_due() == 0
    assert controller.cursor == 1
    clock.advance(1.0)
    scheduler.run_due()
    assert controller.cursor == 2


def test_load_cancels_autoplay(controller, scheduler, clock, sample_result):
    controller.play()
    controller.load(sample_result)
    clock.advance(5)
    assert scheduler.run_due() == 0
    assert controller.cursor == 0
    assert controller.message == MSG_LOADED


def test_load_accepts_plain_step_sequence(scheduler, sample_result):
    pc = PlaybackController(scheduler=scheduler)
    pc.load(list(sample_result.steps[:3]))
    pc.jump_to_end()
    assert pc.cursor == 3
    assert pc.view().visible_cost == 6


def test_empty_run_is_complete_immediately(scheduler):
    pc = PlaybackController(scheduler=scheduler)
    pc.load(())
    assert pc.is_complete
    assert pc.play() is False
    assert pc.step_forward() is False


@pytest.mark.parametrize("bad", [0, -1, float("inf"), float("nan"), True, "fast"])
def test_invalid_speed_rejected(controller, bad):
    with pytest.raises(ValueError):
        controller.set_speed(bad)
    assert controller.speed == 1.0


def test_speed_presets(controller):
    controller.set_speed_preset("fastest")
    assert controller.speed == SPEED_PRESETS["fastest"] == 2.0
    assert controller.interval == pytest.approx(1.0)
    with pytest.raises(ValueError):
        controller.set_speed_preset("warp")


def test_on_change_receives_views(sample_result):
    seen = []
    pc = PlaybackController(scheduler=TickScheduler(lambda: 0.0), on_change=seen.append)
    pc.load(sample_result)
    pc.step_forward()
    pc.step_backward()
    assert [v.cursor for v in seen] == [0, 1, 0]


def test_final_view_is_last_step(sample_result):
    view = final_view(sample_result)
    assert view.cursor == 8
    assert view.is_complete
    assert view.visible_cost == 21
    assert not view.playing
