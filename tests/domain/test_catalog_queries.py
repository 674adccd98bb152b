from __future__ import annotations

from suilog.domain.catalog_queries import REGION_ORDER, filter_aquariums, sort_aquariums
from suilog.domain.model import VisitStatusFilter
from tests.helpers.aquariums import make_aquarium


def test_search_is_case_insensitive_substring() -> None:
    aquariums = [make_aquarium("Sunshine Aquarium"), make_aquarium("Kaiyukan")]

    result = filter_aquariums(aquariums, search_text="  SUNSHINE ")

    assert [aquarium.name for aquarium in result] == ["Sunshine Aquarium"]


def test_region_and_status_filters_combine() -> None:
    north_visited = make_aquarium("Otaru", region="北海道", visits=1)
    north_new = make_aquarium("Asahiyama", region="北海道")
    south_visited = make_aquarium("Churaumi", region="九州・沖縄", visits=2)
    aquariums = [north_visited, north_new, south_visited]

    visited_north = filter_aquariums(
        aquariums,
        regions={"北海道"},
        visit_status=VisitStatusFilter.VISITED,
    )
    not_visited = filter_aquariums(aquariums, visit_status=VisitStatusFilter.NOT_VISITED)

    assert visited_north == [north_visited]
    assert not_visited == [north_new]
    assert filter_aquariums(aquariums) == aquariums


def test_sort_puts_visited_first_then_region_then_name() -> None:
    okinawa = make_aquarium("Churaumi", region="九州・沖縄", visits=1)
    hokkaido_b = make_aquarium("Otaru", region="北海道")
    hokkaido_a = make_aquarium("Asahiyama", region="北海道")
    kanto_visited = make_aquarium("Sunshine", region="関東", visits=1)
    unknown = make_aquarium("Mystery", region="")

    ordered = sort_aquariums([okinawa, hokkaido_b, unknown, hokkaido_a, kanto_visited])

    assert [aquarium.name for aquarium in ordered] == [
        "Sunshine",
        "Churaumi",
        "Asahiyama",
        "Otaru",
        "Mystery",
    ]


def test_region_order_runs_north_to_south() -> None:
    assert REGION_ORDER[0] == "北海道"
    assert REGION_ORDER[-1] == "九州・沖縄"
