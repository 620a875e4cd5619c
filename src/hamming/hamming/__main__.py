helptext = """
`python -m hamming` doesn't do anything on it's own.
Examples:

    Walk a text message through Hamming(7,4), one random flip per block:
    python -m hamming.apps demo OK

    Same with Hamming(8,4) SECDED and two flips per block, seeded:
    python -m hamming.apps demo OK extended 2 17

    Encode a binary string, decode a received word:
    python -m hamming.apps encode 10110100 extended
    python -m hamming.apps decode 0110111

    Codebook and double error table:
    python -m hamming.apps table extended
    python -m hamming.apps pairs 1111
"""


def main() -> None:
    print(helptext)


if __name__ == "__main__":
    main()
