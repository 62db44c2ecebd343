import pytest

from enginecommon.models import Model, ModelList


def test_create_assigns_consecutive_indices():
    models = ModelList()
    first, _ = models.create()
    second, _ = models.create()
    assert (first, second) == (0, 1)
    assert len(models) == 2


def test_created_model_is_reachable_by_index():
    models = ModelList()
    index, model = models.create()
    assert models[index] is model


def test_new_model_is_empty():
    _, model = ModelList().create()
    assert model.vertices == []
    assert model.faces == []
    assert model.gl_vertices == []
    assert model.bounding_sphere == 0.0
    assert model.num_bindable_materials == 0
    assert model.collision_bb_mins == (0.0, 0.0, 0.0)


def test_models_do_not_share_lists():
    a = Model()
    b = Model()
    a.vertices.append((1.0, 2.0, 3.0))
    assert b.vertices == []


def test_is_valid_index_bounds():
    models = ModelList()
    assert not models.is_valid_index(0)
    models.create()
    assert models.is_valid_index(0)
    assert not models.is_valid_index(1)
    assert not models.is_valid_index(-1)


def test_remove_last_invalidates_index():
    models = ModelList()
    models.create()
    index, _ = models.create()
    models.remove_last()
    assert not models.is_valid_index(index)
    assert len(models) == 1


def test_create_after_remove_reuses_index_with_fresh_model():
    models = ModelList()
    index, model = models.create()
    model.vertices.append((1.0, 1.0, 1.0))
    models.remove_last()
    again, fresh = models.create()
    assert again == index
    assert fresh.vertices == []


def test_remove_last_on_empty_list_raises():
    with pytest.raises(IndexError):
        ModelList().remove_last()


@pytest.mark.parametrize("bad_index", [1, -1])
def test_getitem_rejects_invalid_index(bad_index):
    models = ModelList()
    index, model = models.create()
    assert models[index] is model
    with pytest.raises(IndexError):
        models[bad_index]
    assert len(models) == 1


def test_clear_empties_list():
    models = ModelList()
    models.create()
    models.create()
    models.clear()
    assert len(models) == 0
    assert not models.is_valid_index(0)
    index, _ = models.create()
    assert index == 0