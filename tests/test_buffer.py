import threading

from pagegen.core.buffer import DoubleBuffer


class TestDoubleBuffer:
    def test_initial_state(self):
        buf = DoubleBuffer("seed")
        assert buf.read_live() == "seed"
        assert buf.live_index == 0
        assert buf.slot(1) == ""
        assert buf.version == 0

    def test_publish_writes_other_slot_then_flips(self):
        buf = DoubleBuffer("seed")

        assert buf.publish_and_swap("one") == 1
        assert buf.live_index == 1
        assert buf.slot(0) == "seed"
        assert buf.read_live() == "one"

        buf.publish_and_swap("two")
        assert buf.live_index == 0
        assert buf.slot(1) == "one"
        assert buf.read_live() == "two"

    def test_reads_before_swap_are_unchanged(self):
        buf = DoubleBuffer("seed")
        assert [buf.read_live() for _ in range(3)] == ["seed"] * 3
        buf.publish_and_swap("fresh")
        assert buf.read_live() == "fresh"

    def test_age_resets_on_publish(self):
        buf = DoubleBuffer("seed")
        assert buf.age() >= 0
        buf.publish_and_swap("x")
        assert buf.age() < 1

    def test_concurrent_readers_never_see_mixed_content(self):
        values = [("A" * 5000), ("B" * 5000), ("C" * 5000)]
        buf = DoubleBuffer(values[0])
        stop = threading.Event()
        bad: list[str] = []

        def reader():
            while not stop.is_set():
                v = buf.read_live()
                if v not in values:
                    bad.append(v)

        def writer():
            for i in range(2000):
                buf.publish_and_swap(values[1 + i % 2])

        readers = [threading.Thread(target=reader) for _ in range(4)]
        for t in readers:
            t.start()
        w = threading.Thread(target=writer)
        w.start()
        w.join()
        stop.set()
        for t in readers:
            t.join()

        assert bad == []
        assert buf.version == 2000

    def test_concurrent_writers_are_serialized(self):
        buf = DoubleBuffer("seed")
        n_threads, per_thread = 8, 250

        def writer(tag):
            for i in range(per_thread):
                buf.publish_and_swap(f"{tag}-{i}")

        threads = [threading.Thread(target=writer, args=(t,)) for t in range(n_threads)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        total = n_threads * per_thread
        assert buf.version == total
        assert buf.live_index == total % 2
