# patternkit

A small library of building blocks:

- **Rate limiters** (`patternkit.limiter`): `FixedWindowLimiter`,
  `SlidingWindowLimiter`, `LeakyBucket` and `TokenBucket`. Each one takes an
  optional `clock` callable, so tests can control time.
- **Trie** (`patternkit.trie`): `Trie.insert` and `Trie.find` for whole-word
  lookup.
- **Functional helpers** (`patternkit.mapreduce`): `map_str_to_str`,
  `map_str_to_int` and `reduce`.
- **Functional options** (`patternkit.server_options`): `new_server` together
  with `protocol`, `timeout`, `max_conns` and `tls`.
- **Collections of records** (`patternkit.cars`): `Cars.process`,
  `Cars.find_all`, `Cars.map` and `make_sorted_appender`.
- **Design patterns**, each in a module of its own: `observer`, `chain`
  (chain of responsibility), `command`, `iterator`, `mediator`, `memento`,
  `state`, `strategy`, `template_method` and `visitor`.

## Installation

```
pip install patternkit
```

## Examples

Rate limiting:

```python
from patternkit.limiter import TokenBucket

bucket = TokenBucket(rate=2.0, capacity=3.0)
if bucket.allow():
    handle_request()
```

Trie lookup:

```python
from patternkit.trie import Trie

trie = Trie()
for word in ["Python", "Java", "Language", "Trie", "Py"]:
    trie.insert(word)

trie.find("Java")   # True
trie.find("Lang")   # False: only a prefix of an inserted word
```

Functional options:

```python
from patternkit.server_options import new_server, protocol, timeout

server = new_server("localhost", 2048, protocol("udp"), timeout(300))
server.protocol   # "udp"
server.max_conns  # 1000, the default
```

Observer (each subscriber prints one line per message to standard output,
or to the stream passed as `out`):

```python
from patternkit.observer import CreditCard, Email, MsgType, ShortMessage

card = CreditCard("Alice")
card.subscribe(ShortMessage(), MsgType.CONSUME, MsgType.EXPIRE)
card.subscribe(Email(), MsgType.BILL)
card.consume(500.0)
card.send_bill()
```

Iterating over a class of students (the teacher comes first):

```python
from patternkit.iterator import SchoolClass, Student

school_class = SchoolClass("Class 1", "Mr. Wang", "Maths")
school_class.add_student(Student("Zhang", 389), Student("Li", 378))
for member in school_class:
    print(member.desc())
```

State:

```python
from patternkit.state import IPhone

phone = IPhone("13 pro")
phone.battery_status()
phone.connect_plug()
phone.disconnect_plug()
```

## What it does not do

patternkit is a library only: it installs no command-line tool and runs no
server. The rate limiters keep their counts in memory within one process;
they are not shared between processes or machines.

## Running the tests

```
pip install -e ".[test]"
pytest
```