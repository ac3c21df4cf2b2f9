# ---
# jupyter:
#   jupytext:
#     formats: ipynb,py:percent
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#   kernelspec:
#     display_name: Python 3
#     language: python
#     name: python3
# ---

# %% [markdown]
# # Linear regression with PyLinReg
#
# Ordinary least squares finds the weights $w$ minimizing
# $\lVert y - X_b w \rVert^2$, where $X_b$ is the feature matrix with a
# leading column of ones for the intercept. The closed form used here is
#
# $$w = X_b^{+} y$$
#
# with $X_b^{+}$ the Moore–Penrose pseudo-inverse, computed from the
# singular value decomposition. Unlike inverting $X_b^\top X_b$, this
# stays well defined when features are collinear.

# %% Imports
import matplotlib.pyplot as plt
import numpy as np

from pylinreg import ComputeConfig
from pylinreg.datasets import HOUSING_FEATURES, HOUSING_TARGET, load_housing, make_linear
from pylinreg.descriptive import correlation_matrix
from pylinreg import impute
from pylinreg.metrics import mean_absolute_error, mean_square_error
from pylinreg.preprocessing import train_test_split
from pylinreg.regression import fit, predict

SEED = 42

# %% [markdown]
# ## A line we know
#
# 100 points from $y = 3x + 4$ plus unit Gaussian noise.

# %%
X, y = make_linear(100, slope=3.0, intercept=4.0, noise=1.0, seed=SEED)
result = fit(X, y)
print(result.summary())

# %%
x_line = np.array([[0.0], [2.0]])
fig, ax = plt.subplots(figsize=(6, 4))
ax.scatter(X[:, 0], y, s=12, alpha=0.7, label="samples")
ax.plot(x_line[:, 0], predict(result.model, x_line), color="crimson", label="fit")
ax.set_xlabel("x")
ax.set_ylabel("y")
ax.legend()
plt.show()

# %% [markdown]
# Without noise the line is recovered exactly.

# %%
exact = fit([[0.0], [1.0], [2.0]], [4.0, 7.0, 10.0])
print(exact.coefficients, exact.intercept)
print(predict(exact.model, [[0.83]]))

# %% [markdown]
# Duplicating a column makes $X_b$ rank-deficient. The pseudo-inverse
# splits the weight evenly between the copies (the minimum-norm
# solution) and reports the rank instead of failing.

# %%
dup = fit(np.hstack([X, X]), y)
print(dup.coefficients, dup.rank, dup.warnings)

# %% [markdown]
# ## California housing
#
# One row per census block group. `ocean_proximity` is a label, mapped
# to a fixed ordinal code on load.

# %% Load dataset
housing = load_housing()
print(f"Total rows: {housing.n_observations:,}")
housing.dataframe().describe()

# %% [markdown]
# Split first, then impute each part on its own statistics so nothing
# from the test rows reaches the training matrix.

# %%
features = list(HOUSING_FEATURES)
train, test = train_test_split(housing, test_size=0.2, seed=SEED)

X_train = train.columns(features)
y_train = train[HOUSING_TARGET]
X_test = test.columns(features)
y_test = test[HOUSING_TARGET]

print("missing in train:", dict(zip(features, np.isnan(X_train).sum(axis=0))))

X_train = impute.transform(impute.fit(X_train, "median"), X_train)
X_test = impute.transform(impute.fit(X_test, "median"), X_test)

# %% [markdown]
# ## Correlations

# %%
cor = correlation_matrix(np.column_stack([X_train, y_train]))
labels = features + [HOUSING_TARGET]

fig, ax = plt.subplots(figsize=(8, 7))
im = ax.imshow(cor, cmap="RdBu_r", vmin=-1, vmax=1)
ax.set_xticks(range(len(labels)), labels, rotation=60, ha="right")
ax.set_yticks(range(len(labels)), labels)
for i in range(len(labels)):
    for j in range(len(labels)):
        ax.text(j, i, f"{cor[i, j]:.2f}", ha="center", va="center", fontsize=7)
fig.colorbar(im, ax=ax)
plt.tight_layout()
plt.show()

# %% [markdown]
# `median_income` is the strongest single predictor of the target.

# %% [markdown]
# ## Fit and evaluate

# %%
model = fit(X_train, y_train)
print(model.summary())

y_pred = predict(model.model, X_test)
print(f"MSE: {mean_square_error(y_test, y_pred):,.0f}")
print(f"MAE: {mean_absolute_error(y_test, y_pred):,.0f}")

# %%
fig, ax = plt.subplots(figsize=(6, 6))
ax.scatter(y_test, y_pred, s=4, alpha=0.3)
lims = [0, max(y_test.max(), y_pred.max())]
ax.plot(lims, lims, color="crimson")
ax.set_xlabel("actual median_house_value")
ax.set_ylabel("predicted")
plt.show()

# %% [markdown]
# The same fit in single precision. The housing features span several
# orders of magnitude, so expect visible differences from float64 here.
# Pass `ComputeConfig(backend="auto", dtype="float32")` to use a GPU when
# one is available.

# %%
fp32 = fit(X_train, y_train, config=ComputeConfig(dtype="float32"))
print(np.max(np.abs(fp32.coefficients - model.coefficients) / np.abs(model.coefficients)))
