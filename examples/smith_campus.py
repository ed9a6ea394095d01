"""Walk through the sample Smith College campus.

Builds the campus map, borrows a book, moves a student in, buys a coffee
and prints the directory. Building messages are logged at INFO.

Run: python examples/smith_campus.py
"""

import logging

from campus_directory.models import Cafe, House, Library, UnsupportedOperation, smith_campus


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    campus = smith_campus()

    neilson = campus.get_building("Neilson Library")
    assert isinstance(neilson, Library)
    neilson.add_titles(["Beloved", "Middlemarch", "The Waves"])
    neilson.check_out("Beloved")
    neilson.go_to_floor(3)
    neilson.print_collection()

    ziskind = campus.get_building("Ziskind House")
    assert isinstance(ziskind, House)
    ziskind.move_in_all(["Ada", "Grace"])
    print(f"{ziskind.name} has {ziskind.resident_count()} residents")

    cafe = campus.get_building("Campus Cafe")
    assert isinstance(cafe, Cafe)
    cafe.show_options()
    cafe.sell_default()
    try:
        cafe.go_to_floor(1)
    except UnsupportedOperation as e:
        print(e)

    print(campus)


if __name__ == "__main__":
    main()
