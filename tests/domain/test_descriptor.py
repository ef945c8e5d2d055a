"""Tests for the Descriptor value type."""
import numpy as np
import pytest

from facematch.core.exceptions import DimensionMismatchError, InvalidDescriptorError
from facematch.domain.entities.descriptor import Descriptor, as_descriptor, ensure_same_dimension


class TestDescriptor:
    def test_from_list(self):
        d = Descriptor([0.1, 0.2, 0.3])
        assert d.dimension == 3
        assert len(d) == 3
        assert d.tolist() == [0.1, 0.2, 0.3]

    def test_copies_input(self):
        source = np.array([1.0, 2.0, 3.0])
        d = Descriptor(source)
        source[0] = 99.0
        assert d.values[0] == 1.0

    def test_values_are_read_only(self):
        d = Descriptor([1.0, 2.0])
        with pytest.raises(ValueError):
            d.values[0] = 5.0

    def test_equality_is_element_wise(self):
        assert Descriptor([1.0, 2.0]) == Descriptor(np.array([1.0, 2.0]))
        assert Descriptor([1.0, 2.0]) != Descriptor([1.0, 2.5])
        assert hash(Descriptor([1.0, 2.0])) == hash(Descriptor([1.0, 2.0]))

    @pytest.mark.parametrize("bad", [[], [[1.0, 2.0], [3.0, 4.0]], ["a", "b"], [1.0, float("nan")], [float("inf")]])
    def test_rejects_invalid_values(self, bad):
        with pytest.raises(InvalidDescriptorError):
            Descriptor(bad)

    def test_as_descriptor_reuses_instance(self):
        d = Descriptor([1.0])
        assert as_descriptor(d) is d
        assert as_descriptor([1.0]) == d

    def test_ensure_same_dimension(self):
        ensure_same_dimension(Descriptor([1.0, 2.0]), Descriptor([3.0, 4.0]))
        with pytest.raises(DimensionMismatchError) as exc:
            ensure_same_dimension(Descriptor([1.0, 2.0]), Descriptor([1.0, 2.0, 3.0]))
        assert exc.value.details == {"expected": 2, "actual": 3}

    def test_signed_zero_descriptors_hash_alike(self):
        positive = Descriptor([0.0, 1.0])
        negative = Descriptor([-0.0, 1.0])
        assert positive == negative
        assert hash(positive) == hash(negative)
        assert len({positive, negative}) == 1
