"""One linker, many threads — link 1000 snippets in parallel."""

from concurrent.futures import ThreadPoolExecutor

from autolinker import Autolinker

linker = Autolinker(hashtag="twitter", class_name="auto")
snippets = [f"Post {i}: see example{i}.com #day{i}" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(linker.link, snippets))

print(f"Linked {len(results)} snippets in parallel")
print("First:", results[0])
print("Last:", results[-1])
