# patternkit

A collection of small, self-contained design-pattern examples. Each module
implements one pattern around a toy domain and has a short demo that can be
run from the command line. The package has no dependencies beyond the
standard library.

| Pattern          | Module                    | Domain                                      |
|------------------|---------------------------|---------------------------------------------|
| Abstract factory | `patternkit.game_objects` | Vehicles and characters in a game world     |
| Builder          | `patternkit.characters`   | Heroes and villains assembled by a director |
| Factory method   | `patternkit.alerts`       | Error, warning and success text boxes       |
| Singleton        | `patternkit.leaderboard`  | A process-wide score leaderboard            |
| Prototype        | `patternkit.caches`       | Cloneable LRU and LFU caches                |
| Adapter          | `patternkit.signals`      | Reading high- and low-frequency signals     |
| Bridge           | `patternkit.smart_home`   | Remote controllers for smart devices        |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `patternkit.game_objects`

`VehicleFactory` and `CharacterFactory` implement `GameObjectFactory`; their
`create_game_object()` returns a `VehicleObject` named `"Vehicle"` or a
`CharacterObject` named `"Character"` at the origin. `GameObject.move(dx, dy)`
shifts its `pos`, and `render()` returns text such as `Name: Vehicle X: 10 Y: 10`.
`factory_for(kind)` returns a `VehicleFactory` for `"vehicle"` and a
`CharacterFactory` for anything else.

### `patternkit.characters`

`Hero` and `Villain` are dataclasses with `name`, `lives`, `power` and
`position`. `HeroBuilder` and `VillainBuilder` set fields through
`set_name`, `set_lives` and `set_power` (each returns the builder, so calls
can be chained); `build()` hands over the product and starts a fresh one.
`Director.construct_hero` sets up a hero with 100 lives and power 75;
`Director.construct_villain` a "Bad Guy" with 25 lives and power 10.

```python
from patternkit.characters import Director, HeroBuilder, VillainBuilder

director = Director()
hero_builder = HeroBuilder()
director.construct_hero(hero_builder)
hero = hero_builder.build()

villain_builder = VillainBuilder()
director.construct_villain(villain_builder)
villain = villain_builder.build()

hero.attack(villain)
assert villain.represent() == "Bad Guy Lives: 24"
```

### `patternkit.alerts`

`ErrorAlert`, `WarningAlert` and `SuccessAlert` implement `Alert`; their
`create_text_box()` returns a frozen `TextBox` whose `render()` gives the
message. `alert_for(message_type)` returns a `SuccessAlert` for `"success"`,
a `WarningAlert` for `"warning"` and an `ErrorAlert` for anything else.

### `patternkit.leaderboard`

`GlobalLeaderboard()` always returns the same instance, as does
`get_leaderboard()`; the leaderboard refuses to be copied. `insert(username,
score)` keeps entries ordered by score (ties in insertion order), and
`lookup(username)` returns the lowest score recorded for that user, or `-1`.
Iterating gives `(username, score)` pairs in score order. Access is guarded
by a lock.

```python
from patternkit.leaderboard import get_leaderboard

board = get_leaderboard()
board.insert("Alice", 100)
assert board.lookup("Alice") == 100
assert board.lookup("Nobody") == -1
```

### `patternkit.caches`

`LRUCache(capacity)` and `LFUCache(capacity)` store integer keys and values.
`get(key)` returns the value or `-1` when absent; `put(key, value)` evicts the
least recently used entry (LRU) or the least frequently used one, ties going to
the least recently used (LFU). A capacity of 0 stores nothing; a negative
capacity raises `ValueError`. `clone()` returns a new, empty cache with the
same capacity — entries are not copied.

```python
from patternkit.caches import LRUCache, LFUCache

lru = LRUCache(2)
lru.put(1, 10)
lru.put(2, 20)
lru.put(3, 30)          # evicts key 1
assert lru.get(1) == -1

lfu = LFUCache(2).clone()
lfu.put(1, 2)
lfu.put(2, 3)
assert lfu.get(1) == 2
```

### `patternkit.signals`

`sample_bits(raw, step)` reads every `step`-th bit of a 32-bit word from the
top bit down and packs them into one byte (an `int` from 0 to 255); a step
that is not positive raises `ValueError`. `HighFrequencySignal` and
`LowFrequencySignal` wrap a raw word and report their `freq` (2 and 4).
`HighToLowFrequencyAdapter(signal).get_signal()` and
`SignalReader().get_signal(signal)` both return the signal sampled every
fourth bit.

### `patternkit.smart_home`

`SmartLight(name, brightness)` and `SmartHeater(name)` are `SmartDevice`s
with 100 units of power and a random `id` from 1 to 100. `turn_on()` switches
an off device on when power remains, draining 1 unit (light) or the current
heat (heater), and prints a message; `turn_off()` switches it off and prints a
message. `set_power_level` clamps brightness to 1–10 and heat to 1–20.
`SmartHomeObjectController` drives any device through `turn_on_device`,
`turn_off_device`, `set_device_power_level`, and the `power` and
`power_state` properties.

```python
from patternkit.smart_home import SmartHeater, SmartHomeObjectController

remote = SmartHomeObjectController(SmartHeater("StudyHeater"))
remote.set_device_power_level(8)
remote.turn_on_device()          # prints "Heating up!"
assert remote.power == 92
remote.turn_off_device()
```

## Demos

Every module has a demo command:

```
patternkit-game-objects   # creates a vehicle or character, moves it by (10, 10) and shows it
patternkit-characters     # builds a hero and a villain and lets the hero attack
patternkit-alerts         # shows an error, warning or success alert
patternkit-leaderboard    # records a few scores and looks them up
patternkit-caches         # exercises and clones the LRU and LFU caches
patternkit-signals        # reads a low- and a high-frequency signal through the adapter
patternkit-smart-home     # drives a smart light and heater through their controllers
```

`patternkit-game-objects` and `patternkit-alerts` take their choice as the
first argument, or ask for it on standard input when none is given; any answer
other than the listed ones falls back to a character or an error alert.
`patternkit-alerts` and `patternkit-caches` exit with status 1 after printing.
`patternkit-signals` writes each result as a raw byte, not as a number.

## Limitations

These are teaching examples. The leaderboard lives only in memory for the
life of the process and is never saved, the smart devices are simulated
objects that talk to no hardware, and the caches hold integers only.