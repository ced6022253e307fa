"""
Tests for the lock-wrapped graph store.

This module contains tests for ThreadSafeDAG: delegation to the wrapped
store, lock release on error paths, the lock being held across traversal
callbacks, and concurrent mutation from several threads.
"""

import threading

import pytest

from dagstore import (
    DAG,
    DAGConfig,
    DuplicateVertexError,
    ThreadSafeDAG,
    UnknownVertexError,
    Vertex,
    new_dag,
    new_thread_unsafe_dag,
)


class TestFactory:
    """Tests for new_dag and new_thread_unsafe_dag."""

    def test_default_is_thread_safe(self):
        """new_dag wraps the store by default."""
        assert isinstance(new_dag(), ThreadSafeDAG)

    def test_plain_store(self):
        """thread_safe=False returns a plain store."""
        dag = new_dag(DAGConfig(thread_safe=False))

        assert isinstance(dag, DAG)
        assert not isinstance(dag, ThreadSafeDAG)

    def test_thread_unsafe_ignores_flag(self):
        """new_thread_unsafe_dag never wraps."""
        assert isinstance(new_thread_unsafe_dag(DAGConfig(thread_safe=True)), DAG)

    def test_config_is_passed_through(self):
        """The wrapped store receives the configuration."""
        config = DAGConfig(atomic_edges=True)

        assert new_dag(config).config is config


class TestDelegation:
    """ThreadSafeDAG behaves like the store it wraps."""

    def setup_method(self):
        """Set up test fixtures."""
        self.dag = ThreadSafeDAG()
        self.v1, self.v2, self.v3 = Vertex(1), Vertex(2), Vertex(3)
        for v in (self.v1, self.v2, self.v3):
            self.dag.add_vertex(v)
        self.dag.set_children(self.v1, self.v2)
        self.dag.set_parents(self.v3, self.v2)

    def test_queries(self):
        """Queries return the wrapped store's answers."""
        assert self.dag.contains(self.v1)
        assert self.v2 in self.dag
        assert self.dag.get_children(self.v1) == [self.v2]
        assert self.dag.get_parents(self.v3) == [self.v2]
        assert self.dag.get_descendants(self.v1) == [self.v2, self.v3]
        assert self.dag.get_ancestors(self.v3) == [self.v1, self.v2]
        assert self.dag.sources() == [self.v1]
        assert self.dag.sinks() == [self.v3]
        assert self.dag.has_edge(self.v1, self.v2)
        assert self.dag.index_of(self.v3) == 2
        assert self.dag.vertices() == [self.v1, self.v2, self.v3]
        assert list(self.dag) == [self.v1, self.v2, self.v3]
        assert len(self.dag) == 3
        assert self.dag.edge_count() == 2
        assert self.dag.edges() == [(self.v1, self.v2), (self.v2, self.v3)]

    def test_wraps_existing_store(self):
        """An existing DAG can be wrapped."""
        store = DAG()
        v = Vertex("x")
        store.add_vertex(v)

        wrapped = ThreadSafeDAG(store)

        assert wrapped.contains(v)
        assert wrapped.config is store.config

    def test_store_and_config_together(self):
        """A store and a config for a new store cannot both be given."""
        store = DAG()

        with pytest.raises(ValueError, match="not both"):
            ThreadSafeDAG(store, config=DAGConfig(atomic_edges=True))

    def test_config_for_new_store(self):
        """config alone configures the store created by the wrapper."""
        config = DAGConfig(atomic_edges=True)

        assert ThreadSafeDAG(config=config).config is config

    def test_lock_released_after_error(self):
        """Errors propagate and the lock is released."""
        with pytest.raises(DuplicateVertexError):
            self.dag.add_vertex(self.v1)
        with pytest.raises(UnknownVertexError):
            self.dag.get_children(Vertex(99))
        with pytest.raises(UnknownVertexError):
            self.dag.set_children(self.v1, Vertex(99))

        assert not self.dag._lock.locked()
        assert self.dag.contains(self.v1)

    def test_lock_released_after_callback_error(self):
        """A failing traversal callback does not leave the lock held."""

        def operation(v):
            raise ValueError("boom")

        with pytest.raises(ValueError):
            self.dag.preorder_dfs(operation)

        assert not self.dag._lock.locked()


class TestLocking:
    """The lock is held for the whole traversal."""

    def setup_method(self):
        """Set up test fixtures."""
        self.dag = ThreadSafeDAG()
        self.v1, self.v2 = Vertex(1), Vertex(2)
        self.dag.add_vertex(self.v1)
        self.dag.add_vertex(self.v2)
        self.dag.set_children(self.v1, self.v2)

    @pytest.mark.parametrize("walk", ["bfs", "preorder_dfs", "postorder_dfs"])
    def test_lock_held_during_callback(self, walk):
        """Every callback runs with the lock held."""
        held = []
        getattr(self.dag, walk)(lambda v: held.append(self.dag._lock.locked()))

        assert held == [True, True]
        assert not self.dag._lock.locked()

    def test_reentrant_call_blocks(self):
        """A callback calling back into the same graph cannot get the lock."""
        acquired = []

        def operation(v):
            got = self.dag._lock.acquire(timeout=0.05)
            if got:
                self.dag._lock.release()
            acquired.append(got)

        self.dag.bfs(operation)

        assert acquired == [False, False]

    def test_mutation_waits_for_traversal(self):
        """A concurrent add_vertex completes only after the walk."""
        entered = threading.Event()
        release = threading.Event()
        order = []
        v3 = Vertex(3)

        def operation(v):
            if v is self.v1:
                entered.set()
                release.wait(timeout=5)
            order.append(v.value)

        def mutate():
            entered.wait(timeout=5)
            self.dag.add_vertex(v3)
            order.append("added")

        walker = threading.Thread(target=self.dag.bfs, args=(operation,))
        mutator = threading.Thread(target=mutate)
        walker.start()
        mutator.start()
        entered.wait(timeout=5)
        release.set()
        walker.join(timeout=5)
        mutator.join(timeout=5)

        assert order == [1, 2, "added"]
        assert self.dag.contains(v3)

    def test_snapshot_allows_reentrant_queries(self):
        """Walking a snapshot lets callbacks query freely."""
        snapshot = self.dag.snapshot()
        children = {}

        snapshot.bfs(lambda v: children.__setitem__(v.value, snapshot.get_children(v)))

        assert children == {1: [self.v2], 2: []}
        assert isinstance(snapshot, DAG)

    def test_snapshot_is_detached(self):
        """Later mutations are not visible in a snapshot."""
        snapshot = self.dag.snapshot()
        v3 = Vertex(3)
        self.dag.add_vertex(v3)

        assert not snapshot.contains(v3)
        assert self.dag.contains(v3)


class TestConcurrentMutation:
    """Concurrent mutations are serialized without lost updates."""

    def test_two_threads_add_disjoint_vertices(self):
        """Both threads' vertices end up in the graph."""
        dag = new_dag()
        first = [Vertex(("a", i)) for i in range(500)]
        second = [Vertex(("b", i)) for i in range(500)]
        barrier = threading.Barrier(2)

        def add_all(vertices):
            barrier.wait()
            for v in vertices:
                dag.add_vertex(v)

        threads = [
            threading.Thread(target=add_all, args=(first,)),
            threading.Thread(target=add_all, args=(second,)),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(dag) == 1000
        assert all(dag.contains(v) for v in first + second)
        assert sorted(dag.index_of(v) for v in first + second) == list(range(1000))
        assert len(dag.sources()) == 1000

    def test_concurrent_edges_keep_invariants(self):
        """Edges added from several threads stay symmetric."""
        dag = new_dag()
        root = Vertex("root")
        dag.add_vertex(root)
        leaves = [Vertex(i) for i in range(200)]
        for v in leaves:
            dag.add_vertex(v)

        def link(chunk):
            for v in chunk:
                dag.set_parents(v, root)

        threads = [
            threading.Thread(target=link, args=(leaves[i::4],)) for i in range(4)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert dag.get_children(root) == leaves
        assert dag.sources() == [root]
        assert sorted(dag.sinks(), key=dag.index_of) == leaves
