"""Free-threading safe: share one Pattern across 1000 scans in parallel."""

from concurrent.futures import ThreadPoolExecutor

from pinzas import Pattern
from pinzas.profiling import profiled_scan

pattern = Pattern("[", "]", excluded=("draft",))
docs = [f"[title {i}] [draft {i}] body [tag{i % 7}]" for i in range(1000)]


def scan(doc: str) -> list[str]:
    return [m.value for m in pattern.matches(doc)]


with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(scan, docs))

print(f"Scanned {len(results)} documents in parallel")
print("First doc:", results[0])

with profiled_scan() as metrics:
    for doc in docs[:100]:
        pattern.matches(doc)
print(metrics.summary())
