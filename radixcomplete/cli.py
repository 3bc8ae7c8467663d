"""Command-line front end: build a trie from a word list and complete prefixes."""

from __future__ import annotations

import argparse
import logging
import time

from radixcomplete.trie import RadixTrie
from radixcomplete.wordlist import WordList, is_valid_word

log = logging.getLogger("radixcomplete")


def show_completions(trie: RadixTrie, prefix: str) -> None:
    """Print the completions of one prefix."""
    matches = trie.completions(prefix)
    if not matches:
        print(f"No completions for '{prefix}'.")
        return
    print(f"{len(matches)} completion(s) for '{prefix}':")
    for word in matches:
        print(f"  {word}")


def interactive_completion(trie: RadixTrie) -> None:
    """Read prefixes from the terminal until ``quit`` or EOF."""
    print("\n" + "=" * 60)
    print("  RADIX TRIE -- Prefix Completion")
    print("=" * 60)
    print()
    print("Commands:")
    print("  PREFIX                -- list words starting with PREFIX")
    print("  tree                  -- print the trie")
    print("  quit                  -- exit")
    print()

    while True:
        try:
            inp = input("  prefix> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if inp == "quit":
            break
        if inp == "tree":
            print(trie.format())
            continue
        if not is_valid_word(inp):
            print("  Invalid.  Enter a prefix of lowercase letters (a-z).")
            continue

        try:
            show_completions(trie, inp)
        except ValueError as exc:
            print(f"  {exc}")


def run_cli(wordlist: WordList, prefixes: list[str], show_tree: bool = False) -> None:
    """Build the trie and answer *prefixes*, or prompt for them when none are given."""
    t0 = time.time()
    trie = wordlist.build()
    log.info("Built trie over %s words in %.2fs", f"{len(trie.words):,}", time.time() - t0)

    if show_tree:
        print(trie.format())

    if not prefixes:
        interactive_completion(trie)
        return

    for prefix in prefixes:
        if not is_valid_word(prefix):
            log.error("Skipping invalid prefix %r", prefix)
            continue
        show_completions(trie, prefix)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Radix trie prefix completion over a word list",
    )
    parser.add_argument("prefixes", nargs="*", metavar="PREFIX",
                        help="Prefixes to complete (prompt interactively if none)")
    parser.add_argument("--words", type=str, default=None,
                        help="Path to word list file (one lowercase word per line)")
    parser.add_argument("--tree", action="store_true",
                        help="Print the trie structure after building it")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    wordlist = WordList(args.words)
    run_cli(wordlist, args.prefixes, show_tree=args.tree)


if __name__ == "__main__":
    main()
