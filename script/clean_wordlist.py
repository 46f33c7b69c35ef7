"""
Clean a word list into the dictionary format the solver expects.

Features:
- Same rules as the runtime loader: trim, lowercase, 5 letters a–z only.
- Drops blank lines and duplicates, preserving original order by default.
- Optional sorting AFTER dedupe (alphabetical).
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.clean_wordlist --in words.txt --out words_clean.txt --sort
"""

import argparse
from pathlib import Path

from packages.datasets import parse_dictionary, read_text, write_lines


def main(argv=None):
    ap = argparse.ArgumentParser(description="Normalize and dedupe a 5-letter word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args(argv)

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    rep = parse_dictionary(read_text(inp), path=str(inp))
    words = sorted(rep.words) if args.sort else list(rep.words)

    write_lines(words, outp)
    print(f"Input: {inp} ({len(rep.invalid)} invalid, {rep.duplicates} duplicates, {rep.empty} blank) "
          f"-> Output: {outp} ({len(words)} words)")


if __name__ == "__main__":
    main()
