# %% [markdown]
# # editsim Polars Integration Demo
#
# ## API Hierarchy
#
# | Level | Module | Input | Use Case |
# |-------|--------|-------|----------|
# | Core | `es.*` | 2 sequences | Single comparison |
# | Batch | `es.batch.*` | Python lists | List-based matching |
# | Series | `es.match_series`, `es.best_match_series` | pl.Series | Column-level matching |
# | Index | `es.CandidateIndex` | list / Series / DataFrame | Repeated searches |
# | Expression | `.editsim.*` | pl.Expr | Expression chains |

# %%
import polars as pl

import editsim as es

# %% [markdown]
# ---
# ## Expression namespace
#
# Importing editsim registers `.editsim` on every Polars expression.

# %%
df = pl.DataFrame(
    {
        "name": ["John Smith", "Jon Smith", "Jane Doe", "Jhon Smyth", None],
        "alias": ["john smith", "John Smith", "Janet Doe", "John Smith", "Bob"],
    }
)

df.with_columns(
    score=pl.col("name").editsim.similarity("John Smith"),
    dist=pl.col("name").editsim.distance("John Smith"),
    score_ci=pl.col("name").editsim.similarity(pl.col("alias"), mode="ci"),
)

# %%
df.filter(pl.col("name").editsim.is_similar("John Smith", min_similarity=0.8))

# %%
df.with_columns(clean=pl.col("name").editsim.normalize("strict"))

# %%
products = ["apple", "banana", "cherry"]
orders = pl.DataFrame({"item": ["appel", "bananna", "chery", "kiwi"]})
orders.with_columns(
    product=pl.col("item").editsim.best_match(products, min_similarity=0.6)
)

# %% [markdown]
# ---
# ## Series matching

# %%
queries = pl.Series(["appel", "banan", None])
targets = pl.Series(["apple", "banana", "cherry", "apples"])

es.match_series(queries, targets, min_similarity=0.7)

# %%
es.best_match_series(queries, targets, min_similarity=0.7)

# %% [markdown]
# ---
# ## CandidateIndex from a DataFrame

# %%
companies = pl.DataFrame(
    {"id": [1, 2, 3], "name": ["Apple Inc", "Microsoft Corp", "Google LLC"]}
)
index = es.CandidateIndex.from_dataframe(companies, "name", mode="ci")

index.search_series(pl.Series(["apple inc.", "microsoft", "alphabet"]), min_similarity=0.5)
