# hwkit

A handful of small command-line tools and the libraries behind them, in
pure Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `hwkit-zipjpeg <archive>` | Lists the names of the files in a ZipJpeg archive (a JPEG image with a ZIP archive appended). Prints `<archive> is jpeg file` for a plain JPEG, and exits with status 1 if the file does not start as a JPEG. |
| `hwkit-cp2utf8 <in-file> <code-page> <out-file>` | Converts a text file from a single-byte code page to UTF-8. Without arguments it prints usage and the supported code pages: `cp1250`, `cp1251`, `cp1252`, `ibm866`, `iso-8859-5`, `koi8-r`, `koi8-u`. |
| `hwkit-hello` | Prints `Hello World!`. |
| `hwkit-stack` | Builds a stack from 4, 8, 15, 16, 23, 42 and prints it top down (`4 8 15 16 23 42 `), then prints a filtered copy of its odd values, which comes out reversed (`23 15 `). |
| `hwkit-wordcount <file>` | Counts how often each word occurs in a file, prints `word -> count` lines in table order and the total number of unique words. |
| `hwkit-weather <city>` | Fetches the current weather for a city from wttr.in and prints a one-line report in Russian: area, description, wind direction and speed, temperature. Without an argument it prints usage. |

Examples:

```
hwkit-zipjpeg picture.jpg
hwkit-cp2utf8 letter.txt cp1251 letter-utf8.txt
hwkit-wordcount book.txt
hwkit-weather Moscow
```

## Library use

### Code pages (`hwkit.codepages`)

```python
from hwkit.codepages import convert_file, decode_bytes, supported_codepages

print(supported_codepages())
print(decode_bytes(b"\xcf\xf0\xe8", "cp1251"))   # При
convert_file("letter.txt", "koi8-r", "letter-utf8.txt")
```

Code page names are compared on their first ten characters. An unknown code
page raises `UnknownCodePageError`.

### ZipJpeg archives (`hwkit.zipjpeg`)

```python
from hwkit.zipjpeg import NotJpegError, list_archive

try:
    for name in list_archive("picture.jpg"):
        print(name)
except NotJpegError:
    print("not a JPEG file")
```

`iter_zip_names(stream)` yields the same names from an open, seekable binary
stream. Names longer than 512 bytes are cut short.

### Pearson hash and the string-to-integer map

```python
from hwkit.hashmap import DuplicateKeyError, StrIntMap
from hwkit.pearson import pearson_hash32

print(pearson_hash32("apple"))   # 32-bit integer

counts = StrIntMap(pearson_hash32)
counts.insert("apple", 1)
counts["apple"] += 1
print(counts["apple"], len(counts))
del counts["apple"]
```

`StrIntMap` is a mutable mapping backed by an open-addressing table with
double hashing; it grows when its load passes 0.45. `insert` raises
`DuplicateKeyError` when the key is already present, while item assignment
adds or overwrites. Keys are truncated to 8096 characters. Iteration follows
table order, not insertion order.

### Word counting (`hwkit.wordcount`)

```python
from hwkit.wordcount import count_words

with open("book.txt", "rb") as stream:
    counts = count_words(stream)
```

A word is a run of printable, non-space ASCII bytes. A word counts only when
a separator follows it, so a word at the very end of the data is not
counted, and reading stops once a word reaches 8095 bytes.

### JSON trees (`hwkit.jsonnode`, `hwkit.jsoncodec`)

`hwkit.jsonnode` holds a mutable JSON tree. `JsonNode` values are built with
`mknull`, `mkbool`, `mkstring`, `mknumber`, `mkarray` and `mkobject`, and have
`append_element`, `prepend_element`, `append_member`, `prepend_member`,
`remove_from_parent`, `find_element`, `find_member` and iteration over the
children. `check()` raises `JsonCheckError` when the tree is inconsistent.
`utf8_validate` checks bytes or text against RFC 3629.

`hwkit.jsoncodec` reads and writes these trees: `decode`, `validate`,
`encode`, `encode_string` and `stringify`.

```python
from hwkit.jsoncodec import decode, encode, stringify, validate
from hwkit.jsonnode import mknumber, mkobject

node = decode('{"one":1,"t*":[2,3,10]}')
print(encode(node))            # {"one":1,"t*":[2,3,10]}
print(stringify(node, "\t"))   # tab-indented form

obj = mkobject()
obj.append_member("two", mknumber(2))
obj.prepend_member("one", mknumber(1))
print(encode(obj))             # {"one":1,"two":2}

print(validate("[1, 2"))       # False
```

Decoding is strict: no leading `+`, `.5` or `1.`, no `\u0000`, no unpaired
surrogates. Bad input raises `JsonDecodeError`. Numbers are stored as
floats and written with 16 significant digits; NaN and infinities are
written as `null`.

### Weather report (`hwkit.weather_report`, `hwkit.weather`)

```python
from hwkit.weather import fetch_report, make_url
from hwkit.weather_report import parse_report

print(make_url("Moscow"))        # https://wttr.in/Moscow?format=j1
print(fetch_report("Moscow", 5))
```

`parse_report` turns a `format=j1` JSON answer into the report line and
raises `WeatherReportError` when the text is not JSON or a field is missing
or not a string. `fetch_report` raises `WeatherFetchError` on network
failures, answers of 5 MiB or more, and a content type other than
`application/json`.

## What the package does not do

- `hwkit-zipjpeg` only lists file names; it does not extract or check the
  zipped files.
- Code-page conversion goes one way only, into UTF-8.
- `hwkit-weather` needs network access to wttr.in; there is no offline mode
  or caching.