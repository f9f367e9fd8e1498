import pytest

from gametemplate.memory_pool import ObjectPool, PoolManager


class Widget:
    pass


class Gadget:
    pass


def test_allocate_uses_factory():
    pool = ObjectPool(Widget, 4)
    obj = pool.allocate()
    assert isinstance(obj, Widget)
    assert obj in pool
    assert len(pool) == 1


def test_pool_grows_in_blocks():
    pool = ObjectPool(Widget, 2)
    assert pool.block_count == 1
    objs = [pool.allocate() for _ in range(3)]
    assert pool.block_count == 2
    assert len({id(o) for o in objs}) == len(objs)
    assert len(pool) == len(objs)


def test_freed_slot_is_reused_without_growing():
    pool = ObjectPool(Widget, 2)
    a = pool.allocate()
    pool.allocate()
    pool.deallocate(a)
    pool.allocate()
    assert pool.block_count == 1
    assert a not in pool


def test_is_unused_after_everything_freed():
    pool = ObjectPool(Widget, 3)
    assert pool.is_unused()
    objs = [pool.allocate() for _ in range(5)]
    assert not pool.is_unused()
    for obj in objs:
        pool.deallocate(obj)
    assert pool.is_unused()
    assert len(pool) == 0


def test_deallocate_foreign_object_raises():
    pool = ObjectPool(Widget, 2)
    with pytest.raises(ValueError):
        pool.deallocate(Widget())


def test_double_deallocate_raises():
    pool = ObjectPool(Widget, 2)
    obj = pool.allocate()
    pool.deallocate(obj)
    with pytest.raises(ValueError):
        pool.deallocate(obj)


def test_invalid_capacity():
    with pytest.raises(ValueError):
        ObjectPool(Widget, 0)
    with pytest.raises(ValueError):
        PoolManager().create_pool(Widget, -1)


def test_manager_create_and_has_pool():
    manager = PoolManager()
    assert not manager.has_pool(Widget)
    assert manager.create_pool(Widget, 5) is True
    assert manager.has_pool(Widget)
    assert manager.create_pool(Widget, 5) is False
    assert not manager.has_pool(Gadget)


def test_manager_delete_pool():
    manager = PoolManager()
    manager.create_pool(Widget, 5)
    assert manager.delete_pool(Widget) is True
    assert manager.delete_pool(Widget) is False
    assert not manager.has_pool(Widget)


def test_manager_allocate_without_pool_raises():
    with pytest.raises(KeyError):
        PoolManager().allocate(Widget)


def test_manager_deallocate_drops_unused_pool():
    manager = PoolManager()
    manager.create_pool(Widget, 2)
    a = manager.allocate(Widget)
    b = manager.allocate(Widget)
    manager.deallocate(a)
    assert manager.has_pool(Widget)
    manager.deallocate(b)
    assert not manager.has_pool(Widget)


def test_manager_deallocate_but_keep_pool():
    manager = PoolManager()
    manager.create_pool(Gadget, 2)
    obj = manager.allocate(Gadget)
    assert isinstance(obj, Gadget)
    manager.deallocate_but_keep_pool(obj)
    assert manager.has_pool(Gadget)


def test_manager_ignores_objects_without_pool():
    manager = PoolManager()
    manager.create_pool(Widget, 2)
    manager.deallocate(Gadget())
    manager.deallocate_but_keep_pool(Gadget())
    assert manager.has_pool(Widget)
    assert not manager.has_pool(Gadget)