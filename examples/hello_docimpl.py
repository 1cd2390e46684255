import time

import docimpl


def main() -> None:
    server = docimpl.run(port=57794)

    implementors = docimpl.read_page("rand/trait.Rng")
    for unit, entries in implementors.items():
        for entry in entries:
            print(f"{unit}: impl {entry.trait_path} for {entry.implementor_path}")

    if isinstance(server, docimpl.DocimplServer):
        print(server.url)

    try:
        while True:
            time.sleep(3600)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
