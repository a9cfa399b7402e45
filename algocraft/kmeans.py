"""K-means clustering of points in memory or in a binary sample file."""

from __future__ import annotations

import math
import os
import random
import struct
from collections.abc import Sequence
from enum import Enum

_INT = struct.Struct("=i")


class InitMode(Enum):
    """How the initial cluster means are chosen."""

    RANDOM = 0
    MANUAL = 1
    UNIFORM = 2


class KMeans:
    """K-means with ``cluster_num`` clusters of ``dim_num``-dimensional points.

    Clustering stops after ``max_iter_num`` iterations or once the mean cost
    has stayed within ``end_error`` (relative) of the previous one three times.
    """

    def __init__(self, dim_num: int = 1, cluster_num: int = 1) -> None:
        if dim_num < 1 or cluster_num < 1:
            raise ValueError("dimension and cluster count must be positive")
        self.dim_num = dim_num
        self.cluster_num = cluster_num
        self._means = [[0.0] * dim_num for _ in range(cluster_num)]
        self.init_mode = InitMode.RANDOM
        self.max_iter_num = 100
        self.end_error = 0.001
        self._rng = random.Random()

    def set_mean(self, i: int, mean: Sequence[float]) -> None:
        """Set the mean of cluster ``i``."""
        if len(mean) != self.dim_num:
            raise ValueError(f"mean must have {self.dim_num} components")
        self._means[i] = [float(v) for v in mean]

    def mean(self, i: int) -> list[float]:
        """Return a copy of the mean of cluster ``i``."""
        return list(self._means[i])

    def cluster(self, data: Sequence[Sequence[float]]) -> list[int]:
        """Cluster ``data`` and return the cluster index of every point."""
        samples = [self._check_point(point) for point in data]
        self._fit(samples)
        return [self._label(point)[0] for point in samples]

    def cluster_file(
        self,
        sample_path: str | os.PathLike[str],
        label_path: str | os.PathLike[str],
    ) -> None:
        """Cluster the samples in a binary file and write their labels.

        The sample file holds an int count, an int dimension, then the points
        as doubles. The label file receives the int count and one int label
        per point.
        """
        with open(sample_path, "rb") as f:
            raw = f.read()
        if len(raw) < 2 * _INT.size:
            raise ValueError("sample file is too short")
        size, dim = struct.unpack_from("=ii", raw)
        if dim != self.dim_num:
            raise ValueError(f"sample dimension {dim} does not match {self.dim_num}")
        if size < self.cluster_num:
            raise ValueError("fewer samples than clusters")
        values = struct.unpack_from(f"={size * dim}d", raw, 2 * _INT.size)
        samples = [list(values[i * dim : (i + 1) * dim]) for i in range(size)]

        self._fit(samples)
        with open(label_path, "wb") as f:
            f.write(_INT.pack(size))
            for point in samples:
                f.write(_INT.pack(self._label(point)[0]))

    def __str__(self) -> str:
        lines = [
            "<KMeans>",
            f"<DimNum> {self.dim_num} </DimNum>",
            f"<ClusterNum> {self.cluster_num} </ClusterNum>",
            "<Mean>",
        ]
        lines.extend("".join(f"{v:g} " for v in mean) for mean in self._means)
        lines.extend(["</Mean>", "</KMeans>"])
        return "\n".join(lines) + "\n"

    def _check_point(self, point: Sequence[float]) -> list[float]:
        if len(point) != self.dim_num:
            raise ValueError(f"point {point!r} does not have {self.dim_num} components")
        return [float(v) for v in point]

    def _init_means(self, samples: list[list[float]]) -> None:
        size = len(samples)
        if self.init_mode is InitMode.RANDOM:
            interval = size // self.cluster_num
            for i in range(self.cluster_num):
                select = interval * i + self._rng.randrange(max(interval, 1))
                self._means[i] = list(samples[select])
        elif self.init_mode is InitMode.UNIFORM:
            for i in range(self.cluster_num):
                self._means[i] = list(samples[i * size // self.cluster_num])

    def _fit(self, samples: list[list[float]]) -> None:
        size = len(samples)
        if size < self.cluster_num:
            raise ValueError("fewer samples than clusters")
        self._init_means(samples)

        iterations = 0
        curr_cost = 0.0
        unchanged = 0
        while True:
            counts = [0] * self.cluster_num
            sums = [[0.0] * self.dim_num for _ in range(self.cluster_num)]
            last_cost = curr_cost
            curr_cost = 0.0

            for point in samples:
                label, dist = self._label(point)
                curr_cost += dist
                counts[label] += 1
                sums[label] = [s + v for s, v in zip(sums[label], point)]
            curr_cost /= size

            for i, (count, total) in enumerate(zip(counts, sums)):
                if count > 0:
                    self._means[i] = [s / count for s in total]

            iterations += 1
            if abs(last_cost - curr_cost) < self.end_error * last_cost:
                unchanged += 1
            if iterations >= self.max_iter_num or unchanged >= 3:
                break

    def _label(self, point: Sequence[float]) -> tuple[int, float]:
        best_label = 0
        best_dist = -1.0
        for i, mean in enumerate(self._means):
            dist = math.dist(point, mean)
            if best_dist == -1.0 or dist < best_dist:
                best_dist = dist
                best_label = i
        return best_label, best_dist