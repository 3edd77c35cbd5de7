"""Restructuring example: sort, drop duplicates, swap pairs and reverse."""

from sentinelq import StringQueue


def main() -> None:
    """Demonstrate the in-place restructuring operations."""
    queue = StringQueue()
    for word in ["pear", "apple", "fig", "apple", "kiwi", "plum", "fig", "date"]:
        queue.insert_tail(word)
    print(f"Start:            {queue.values()}")

    queue.sort()
    print(f"Sorted:           {queue.values()}")

    queue.delete_duplicates()
    print(f"Unique only:      {queue.values()}")

    queue.swap_pairs()
    print(f"Pairs swapped:    {queue.values()}")

    queue.reverse()
    print(f"Reversed:         {queue.values()}")

    queue.delete_middle()
    print(f"Middle deleted:   {queue.values()}")

    queue.check_invariant()
    queue.destroy()


if __name__ == "__main__":
    main()
