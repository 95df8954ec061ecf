# %% [markdown]
# # editsim: Quickstart
#
# **Typos, swaps and thresholds** - a short tour of edit-distance similarity
#
# ---
#
# ## The Problem
#
# People mistype. The most common slips are a wrong letter, a missing or
# extra letter, and two neighbouring letters swapped:
#
# ```
# "recieve"    vs  "receive"     (swap)
# "definately" vs  "definitely"  (wrong letter)
# "accomodate" vs  "accommodate" (missing letter)
# ```
#
# **editsim** counts those slips with the optimal string alignment variant of
# Damerau-Levenshtein distance, turns the count into a similarity score, and
# skips hopeless comparisons with a cheap bound.
#
# ## Table of Contents
#
# | Part | Topic |
# |------|-------|
# | 1 | Distance |
# | 2 | Similarity |
# | 3 | Threshold gate |
# | 4 | Ranking candidates |
# | 5 | Reusable index |
# | 6 | String helpers |

# %%
import random
import time

import editsim as es

# %% [markdown]
# ---
# ## Part 1: Distance
#
# Each substitution, insertion, deletion or adjacent swap costs one edit.

# %%
pairs = [
    ("computer", "computer"),
    ("computer", "compter"),
    ("computer", "comupter"),
    ("computer", "cmoputte"),
    ("recieve", "receive"),
]
for a, b in pairs:
    print(f"{a:>10} -> {b:<10} {es.damerau_levenshtein(a, b)} edit(s)")

# %% [markdown]
# Case handling is a mode. `True`, `"ci"` and `ComparisonMode.CASE_INSENSITIVE`
# all mean "ignore case".

# %%
print(es.damerau_levenshtein("cars", "BaTS"))  # 3
print(es.damerau_levenshtein("cars", "BaTS", mode=True))  # 2
print(es.damerau_levenshtein_ci("cars", "BaTS"))  # 2

# %% [markdown]
# Operands don't have to be text: bytes and lists of tokens work too.

# %%
print(es.damerau_levenshtein(b"abc", b"acb"))
print(es.damerau_levenshtein(["new", "york", "city"], ["york", "new", "city"]))

# %% [markdown]
# ---
# ## Part 2: Similarity
#
# Similarity is `(len(target) - distance) / max(len(source), len(target))`,
# clamped at zero. It is normalized against the *target*, so argument order
# matters.

# %%
print(es.similarity("yaho", "yahoo"))  # 0.8
print(es.similarity("c", "cars"))  # 0.25
print(es.similarity("cars", "c"))  # 0.0

# %% [markdown]
# ---
# ## Part 3: Threshold gate
#
# `similarity_bounded` first compares the sorted characters of both operands.
# That order-blind count can only underestimate the distance, so when even
# the optimistic score misses the threshold the exact distance is skipped.
# `None` means "below threshold".

# %%
print(es.similarity_estimate("linux", "microsoft"))
print(es.similarity_bounded("linux", "microsoft", 0.5))  # None, from the bound alone
print(es.similarity_bounded("yahoo", "bahoo", 0.8))  # 0.8
print(es.similarity_bounded("yahoo", "bahoo", 0.9))  # None

# %% [markdown]
# Anagrams fool the bound but not the exact check:

# %%
print(es.similarity_estimate("listen", "silent"))  # 1.0
print(es.similarity_bounded("listen", "silent", 0.9))  # None

# %% [markdown]
# How much does the gate save? Compare random strings against a strict threshold.

# %%
rng = random.Random(42)
words = [es.text.random_string(12, rng=rng) for _ in range(2000)]

start = time.perf_counter()
exact = [w for w in words if es.similarity("editdistance", w) >= 0.8]
exact_time = time.perf_counter() - start

start = time.perf_counter()
gated = [w for w in words if es.similarity_bounded("editdistance", w, 0.8) is not None]
gated_time = time.perf_counter() - start

print(f"exact: {len(exact)} matches in {exact_time * 1000:.1f} ms")
print(f"gated: {len(gated)} matches in {gated_time * 1000:.1f} ms")

# %% [markdown]
# ---
# ## Part 4: Ranking candidates

# %%
movies = [
    "The Shawshank Redemption",
    "The Godfather",
    "The Dark Knight",
    "Pulp Fiction",
    "Fight Club",
    "Inception",
    "The Matrix",
]

query = "pulp ficton"
for m in es.find_best_matches(movies, query, limit=3, mode="ci"):
    print(f"  [{m.score:.0%}] {m.text}")

# %%
print(es.batch.pairwise(["hello", "world"], ["hallo", "word"]))
print(es.batch.similarity_matrix(["cat", "dog"], ["cat", "cart", "dot"]))

# %% [markdown]
# ---
# ## Part 5: Reusable index
#
# `CandidateIndex` keeps a candidate list and a mode for repeated searches,
# and can be saved to disk.

# %%
index = es.CandidateIndex(["Apple Inc", "Microsoft Corp", "Google LLC"], mode="ci")
for q in ["apple inc", "microsft corp", "gogle"]:
    best = index.search(q, min_similarity=0.5, limit=1)
    print(q, "->", best[0].text if best else None)

# %% [markdown]
# ---
# ## Part 6: String helpers
#
# Cleanup that usually happens before scoring.

# %%
print(es.normalize_string("  Résumé, Final!  ", "strict"))
print(es.text.strip_split("first>,<second>,<third\r\n", ">,<"))
print(es.text.squeeze("i need   a  squeeze!"))
print(es.text.rot13("Hello"))
print(es.text.is_integer("2024"), es.text.is_integer("20.24"))
