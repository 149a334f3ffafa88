"""Thread safety tests for Mirador.

Parsing and highlighting keep no shared mutable state apart from the
lazily built rule tables, so concurrent calls must give the same results
as sequential ones.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

from mirador import Markdown, ParseConfig, highlight, parse
from mirador.highlighting.languages import ALIASES
from mirador.nodes import HorizontalRule, Image, Paragraph, Table

DOCUMENT = """# Title

Some **bold** and `code`.

---

| a | b |
|---|---|
| 1 | 2 |

![one](1.png)

```python
def f(x):
    return x + 1  # add
```

***
"""

SNIPPET = 'x = "s" # c\nFoo(1) // d'


class TestConcurrentParsing:
    def test_same_document_many_threads(self) -> None:
        expected = parse(DOCUMENT)
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda _: parse(DOCUMENT), range(64)))
        assert all(result == expected for result in results)

    def test_ordinals_are_per_call(self) -> None:
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda _: parse(DOCUMENT), range(32)))
        for blocks in results:
            rules = [b.ordinal for b in blocks if isinstance(b, HorizontalRule)]
            images = [b.ordinal for b in blocks if isinstance(b, Image)]
            tables = [b.ordinal for b in blocks if isinstance(b, Table)]
            assert rules == [0, 1]
            assert images == [0]
            assert tables == [0]

    def test_markdown_instances_keep_their_config(self) -> None:
        with_tables = Markdown()
        without_tables = Markdown(config=ParseConfig(tables_enabled=False))
        source = "| a |\n|---|"
        barrier = threading.Barrier(8)

        def worker(index: int) -> type:
            md = with_tables if index % 2 == 0 else without_tables
            barrier.wait()
            return type(md.parse(source)[0])

        with ThreadPoolExecutor(max_workers=8) as executor:
            kinds = list(executor.map(worker, range(8)))

        assert kinds == [Table, Paragraph] * 4


class TestConcurrentHighlighting:
    def test_first_use_builds_consistent_rules(self) -> None:
        names = sorted(ALIASES)
        expected = {name: highlight(SNIPPET, name) for name in names}
        barrier = threading.Barrier(len(names))

        def worker(name: str) -> bool:
            barrier.wait()
            return highlight(SNIPPET, name) == expected[name]

        with ThreadPoolExecutor(max_workers=len(names)) as executor:
            assert all(executor.map(worker, names))

    def test_concurrent_highlight_matches_sequential(self) -> None:
        code = "def f():\n    return 'x'  # done\n" * 20
        expected = highlight(code, "python")
        results: list[bool] = []
        lock = threading.Lock()

        def worker() -> None:
            for _ in range(10):
                ok = highlight(code, "python") == expected
                with lock:
                    results.append(ok)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 80
        assert all(results)
