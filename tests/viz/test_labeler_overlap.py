from kintuni.viz.core.labeler import Labeler, LabelRequest


def test_labeler_avoids_overlaps_in_primary_band():
    requests = [
        LabelRequest(
            identifier=f"body-{idx}",
            angle=idx * 18.0,
            radius=110.0,
            width=24.0 + (idx % 3) * 6.0,
            height=12.0,
        )
        for idx in range(18)
    ]

    labeler = Labeler(200.0, 200.0, band_radius=110.0, band_height=30.0, radial_step=6.0, max_iterations=4)
    placements = labeler.place(requests)

    primaries = [placement for placement in placements if not placement.leader]
    for index, placement in enumerate(primaries):
        bounds = placement.bounds()
        for other in primaries[index + 1 :]:
            assert not bounds.overlaps(other.bounds(), angle_tolerance=0.1, radial_tolerance=0.1)

    # Fallback leader placements should still expose both endpoints.
    for placement in placements:
        if placement.leader:
            assert placement.leader_start is not None
            assert placement.leader_end is not None


def test_crowded_points_are_nudged_or_led_out():
    requests = [
        LabelRequest(identifier=name, angle=90.0 + offset, radius=100.0, width=20.0, height=20.0)
        for name, offset in (("Sun", 0.0), ("Mercury", 1.0), ("Venus", 2.0))
    ]
    labeler = Labeler(0.0, 0.0, band_radius=100.0, band_height=60.0, radial_step=25.0, max_iterations=2)

    placements = {placement.identifier: placement for placement in labeler.place(requests)}

    radii = {placement.radius for placement in placements.values()}
    assert len(radii) == 3


def test_placement_uses_chart_angle_convention():
    labeler = Labeler(100.0, 100.0, band_radius=50.0, band_height=10.0, shift_in_degrees=180.0)

    (placement,) = labeler.place(
        [LabelRequest(identifier="As", angle=0.0, radius=50.0, width=10.0, height=10.0)]
    )

    # Angle 0 sits on the left of the wheel.
    assert placement.x == 50.0
    assert abs(placement.y - 100.0) < 1e-9
