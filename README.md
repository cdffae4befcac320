# chatexport

Read the HTML pages of an exported chat history, turn each message block
into a `Message` record (sender, text content, UTC timestamp, attachment
flag) and filter the messages with simple queries. Only the standard library
is needed.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Command line

    chatexport [FILES ...] [options]

The command reads the given HTML pages (or, when none are given,
`messages.html` followed by `messages2.html` … `messages100.html` in the
directory named by `--data-dir`, `data` by default), parses them on a pool
of worker threads and stores the messages in page order. It then selects the
messages that match the query, prints how many matched and, on the next line,
the time taken in microseconds.

Options:

- `--data-dir DIR` — directory of the default pages (default `data`).
- `--sender NAME` — only messages from this sender.
- `--contains WORD` — the content must hold this word, ignoring ASCII case;
  may be given more than once, and a message matches if it holds any of them.
- `--attachment` / `--no-attachment` — only messages with / without the
  attachment flag.
- `--workers N` — number of worker threads (default 6).
- `--print` — print each matching message, one line each, before the count.

If a page cannot be read or a message in it has a bad timestamp, the command
prints `error: ...` to standard error and exits with status 1.

## Library

```python
from chatexport.cli import read_file, load_messages, format_message
from chatexport.node import parse_html
from chatexport.extractor import MessageExtractor
from chatexport.database import MessageDatabase
from chatexport.query import MessageQuery

document = parse_html(read_file("data/messages.html"))
messages = MessageExtractor().extract(document)   # an HTML string works too

db = MessageDatabase()
for message in messages:
    db.insert(message)

query = MessageQuery(sender="Alice", contains=["hello", "hi"])
for message in db.select(query):
    print(format_message(message))

# Many pages at once, parsed on worker threads:
db = load_messages(["data/messages.html", "data/messages2.html"], workers=4)
print(len(db))
```

### Modules

- `chatexport.message` — `Message`, a frozen dataclass with `sender`,
  `content`, `timestamp`, `attachment` and `id`; `Message.contains(word)`
  tests the content ignoring ASCII case.
- `chatexport.textutil` — `case_insensitive_find(text, sub)`, returning the
  index of the first match with ASCII case folding, 0 for an empty `sub` and
  -1 when not found.
- `chatexport.query` — `MessageQuery(sender=None, contains=None,
  has_attachment=None)`. Unset criteria match everything. A message matches
  when `sender` equals its sender exactly, when at least one word of
  `contains` occurs in its content, and when `has_attachment` equals its
  attachment flag.
- `chatexport.database` — `MessageDatabase`, an in-memory list of messages
  in insertion order with `insert`, `select(query)` (any object with a
  `matches(message)` method), `messages()` (a copy), `len()` and iteration.
- `chatexport.pipeline` — `Pipeline(workers)`, a fixed pool of threads.
  `submit_task(function)` queues a callable and returns a
  `concurrent.futures.Future`; tasks are taken in submission order.
  `shutdown()` (also run on leaving a `with` block) lets queued tasks finish
  and joins the workers; submitting afterwards raises `RuntimeError`. An
  exception raised by a task is set on its future and also kept in
  `Pipeline.exceptions`.
- `chatexport.node` — `parse_html(text)` builds a small tree of `Node`
  objects and returns the `html` element. `Node` has `tag`,
  `attribute(name)`, `text` (the node's own non-blank text children joined),
  `matches_selector`, `query_selector` and `query_selector_all(selector,
  depth=None)`. A `Selector(tag=None, class_=None, id=None)` matches an
  element whose tag and id are equal to those given and whose `class`
  attribute contains `class_` as a substring.
- `chatexport.extractor` — `MessageExtractor` and `parse_timestamp`.
- `chatexport.cli` — `read_file`, `format_message`, `load_messages` and
  `main`, the command above.

### How messages are found

`MessageExtractor.extract` looks for the first element whose class contains
`history` and takes its direct children whose class contains
`message default`. For each block:

- the sender is the text of the first element with class `from_name`, with
  spaces, tabs and newlines removed (empty if there is none);
- the content is the text of every element with class `text`, joined;
- the attachment flag is set when the block holds any element whose class
  contains `from_name`;
- the timestamp comes from the `title` attribute of the first `div` whose
  class contains `date`. A block without one raises `ValueError`.

`parse_timestamp` reads `DD.MM.YYYY HH:MM:SS UTC+HH:MM` and returns an aware
UTC `datetime`. The zone token must be present; if it does not have the
`UTC±HH:MM` shape the time is taken as local time. Anything else raises
`ValueError`.

## What it does not do

The message database lives in memory only; nothing is saved to disk, and
every run parses the pages again. There is no analysis of the messages beyond
the query filters, and queries cannot filter by time.