import threading

import pytest

from philosophers.parsing import Settings
from philosophers.table import Fork, Philosopher, Table
from philosophers.timing import TimeUnit, gettime


def make_table(n=5, limit=-1):
    return Table(Settings(n, 800_000, 200_000, 200_000, limit))


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_every_philo_holds_its_two_neighbouring_forks(n):
    table = make_table(n)
    assert [f.fork_id for f in table.forks] == list(range(n))
    assert [p.id for p in table.philos] == list(range(1, n + 1))
    for pos, philo in enumerate(table.philos):
        ids = {philo.first_fork.fork_id, philo.second_fork.fork_id}
        assert ids == {pos, (pos + 1) % n}


def test_even_philos_take_own_fork_first():
    table = make_table(4)
    for pos, philo in enumerate(table.philos):
        own = table.forks[pos]
        if philo.id % 2 == 0:
            assert philo.first_fork is own
        else:
            assert philo.second_fork is own


def test_lone_philo_has_single_fork():
    table = make_table(1)
    philo = table.philos[0]
    assert philo.first_fork is philo.second_fork is table.forks[0]


def test_no_philosophers():
    table = make_table(0)
    assert table.philos == []
    assert table.all_threads_running()


def test_philo_defaults():
    philo = make_table().philos[2]
    assert philo.snapshot() == (False, 0)
    assert philo.meals_counter == 0


def test_start_and_begin_meal():
    philo = make_table().philos[0]
    philo.start(100)
    assert philo.snapshot() == (False, 100)
    assert philo.begin_meal(250) == 1
    assert philo.begin_meal(300) == 2
    assert philo.snapshot() == (False, 300)
    assert philo.meals_counter == 2


def test_mark_full():
    philo = make_table().philos[0]
    philo.mark_full()
    assert philo.full
    assert philo.snapshot()[0] is True


def test_finish():
    table = make_table()
    assert not table.simulation_finished()
    table.finish()
    assert table.simulation_finished()


def test_release_records_start_and_readiness():
    table = make_table()
    before = gettime(TimeUnit.MILLISECOND)
    assert not table.all_threads_ready
    table.release()
    assert table.all_threads_ready
    assert before <= table.start_simulation <= gettime(TimeUnit.MILLISECOND)


def test_wait_all_threads_blocks_until_release():
    table = make_table(2)
    passed = threading.Event()
    seen = []

    def worker():
        table.wait_all_threads()
        seen.append(table.all_threads_ready)
        passed.set()

    thread = threading.Thread(target=worker)
    thread.start()
    assert not passed.wait(0.05)
    assert table.all_threads_ready is False
    assert seen == []
    table.release()
    thread.join(timeout=2)
    assert passed.is_set()
    assert seen == [True]


def test_running_count():
    table = make_table(3)
    table.mark_running()
    table.mark_running()
    assert not table.all_threads_running()
    table.mark_running()
    assert table.all_threads_running()
    table.mark_running()
    assert not table.all_threads_running()


def test_running_count_concurrent():
    table = make_table(50)
    threads = [threading.Thread(target=table.mark_running) for _ in range(50)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert table.all_threads_running()


def test_fork_lock_is_exclusive():
    fork = Fork(3)
    assert fork.lock.acquire(blocking=False)
    assert not fork.lock.acquire(blocking=False)
    fork.lock.release()


def test_philosopher_direct_construction():
    a, b = Fork(0), Fork(1)
    philo = Philosopher(7, a, b)
    assert philo.first_fork is a and philo.second_fork is b
    assert philo.begin_meal(10) == 1