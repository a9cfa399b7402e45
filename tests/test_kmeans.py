import struct

import pytest

from algocraft.kmeans import InitMode, KMeans

DEMO = [
    [0.0, 0.2, 0.4],
    [0.3, 0.2, 0.4],
    [0.4, 0.2, 0.4],
    [0.5, 0.2, 0.4],
    [5.0, 5.2, 8.4],
    [6.0, 5.2, 7.4],
    [4.0, 5.2, 4.4],
    [10.3, 10.4, 10.5],
    [10.1, 10.6, 10.7],
    [11.3, 10.2, 10.9],
]


def _uniform(dim, clusters):
    km = KMeans(dim, clusters)
    km.init_mode = InitMode.UNIFORM
    return km


def test_demo_clustering_labels():
    km = _uniform(3, 4)
    assert km.cluster(DEMO) == [0, 1, 1, 1, 2, 2, 2, 3, 3, 3]


def test_means_are_centroids_of_their_members():
    km = _uniform(3, 4)
    labels = km.cluster(DEMO)
    for c in range(4):
        members = [p for p, lab in zip(DEMO, labels) if lab == c]
        for d in range(3):
            expected = sum(p[d] for p in members) / len(members)
            assert km.mean(c)[d] == pytest.approx(expected)


def test_points_are_nearest_to_their_own_mean():
    km = _uniform(3, 4)
    labels = km.cluster(DEMO)
    for point, label in zip(DEMO, labels):
        own = sum((a - b) ** 2 for a, b in zip(point, km.mean(label)))
        for c in range(4):
            other = sum((a - b) ** 2 for a, b in zip(point, km.mean(c)))
            assert own <= other


def test_manual_initial_means():
    km = KMeans(2, 2)
    km.init_mode = InitMode.MANUAL
    km.set_mean(0, [10.0, 10.0])
    km.set_mean(1, [0.0, 0.0])
    labels = km.cluster([[0.1, 0.0], [9.9, 10.0], [0.0, 0.2], [10.1, 9.8]])
    assert labels == [1, 0, 1, 0]


def test_random_init_separates_clear_groups():
    km = KMeans(1, 2)
    labels = km.cluster([[0.0], [0.1], [0.2], [100.0], [100.1], [100.2]])
    assert labels[0] == labels[1] == labels[2]
    assert labels[3] == labels[4] == labels[5]
    assert labels[0] != labels[3]


def test_cluster_file_matches_in_memory(tmp_path):
    sample = tmp_path / "samples.bin"
    labels_path = tmp_path / "labels.bin"
    flat = [v for point in DEMO for v in point]
    sample.write_bytes(struct.pack("=ii", len(DEMO), 3) + struct.pack(f"={len(flat)}d", *flat))

    _uniform(3, 4).cluster_file(sample, labels_path)
    raw = labels_path.read_bytes()
    count = struct.unpack_from("=i", raw)[0]
    labels = list(struct.unpack_from(f"={count}i", raw, 4))
    assert count == len(DEMO)
    assert labels == _uniform(3, 4).cluster(DEMO)


def test_cluster_file_dimension_mismatch(tmp_path):
    sample = tmp_path / "samples.bin"
    sample.write_bytes(struct.pack("=ii", 2, 2) + struct.pack("=4d", 0, 0, 1, 1))
    with pytest.raises(ValueError):
        KMeans(3, 1).cluster_file(sample, tmp_path / "labels.bin")


def test_too_few_samples_raises():
    with pytest.raises(ValueError):
        KMeans(1, 3).cluster([[1.0], [2.0]])


def test_wrong_point_dimension_raises():
    with pytest.raises(ValueError):
        KMeans(2, 1).cluster([[1.0, 2.0], [1.0]])


def test_set_mean_wrong_length_raises():
    with pytest.raises(ValueError):
        KMeans(2, 1).set_mean(0, [1.0])


def test_mean_returns_copy():
    km = KMeans(2, 1)
    km.set_mean(0, [1.0, 2.0])
    km.mean(0).append(3.0)
    assert km.mean(0) == [1.0, 2.0]


def test_str_format():
    km = KMeans(2, 1)
    km.set_mean(0, [1.5, 2.0])
    text = str(km)
    lines = text.splitlines()
    assert lines[0] == "<KMeans>"
    assert lines[1] == "<DimNum> 2 </DimNum>"
    assert lines[3] == "<Mean>"
    assert lines[4] == "1.5 2 "
    assert lines[-1] == "</KMeans>"