"""Basic usage example for sentinelq."""

from sentinelq import StringQueue, read_cstring


def main() -> None:
    """Demonstrate inserting, removing and releasing elements."""
    with StringQueue() as queue:
        print("=== Basic Insert/Remove Example ===\n")

        queue.insert_tail("send_email")
        queue.insert_tail("process_data")
        queue.insert_head("generate_report")

        print(f"Queue: {queue.values()}")
        print(f"Size: {queue.size()}\n")

        # Removed elements belong to the caller until released
        buffer = bytearray(8)
        while queue:
            element = queue.remove_head(buffer)
            assert element is not None
            print(f"  Removed {element.value!r} (buffer holds {read_cstring(buffer)!r})")
            element.release()

        print(f"\nFinal size: {queue.size()}")


if __name__ == "__main__":
    main()
