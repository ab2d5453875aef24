# sitewordcount

sitewordcount downloads several web pages at the same time and counts the words in the visible text of each page.

Pages are fetched over HTTP or HTTPS with the user agent `website-word-counter/1.0`. Redirects are followed. Each request uses a 30-second network timeout. Text inside `script`, `style`, `noscript`, `head`, `meta`, `link` and `title` elements is ignored. A word is any run of non-whitespace characters that contains at least one ASCII letter or digit.

The package needs only the Python standard library and runs on Python 3.10 or later.

## Installation

```
pip install .
```

## Command-line use

```
sitewordcount https://example.com https://www.example.org
```

An argument is accepted only if it starts with `http://` or `https://` and contains a dot after the scheme. Any other argument is skipped, and a warning is written to standard error.

The tool first prints how many URLs it will fetch. As each page finishes, it prints a progress line with the page's byte length and word count, or an error line. At the end it prints a summary:

```
Summary:
URL: https://example.com
  Word count: 42
```

A page is reported as `Error: Failed to fetch content or HTTP error.` in these cases:

* the page could not be fetched,
* it returned a status outside 200–399,
* its body was empty.

If you give no arguments, the tool prints a usage message and exits with status 1.

## Library use

```python
from sitewordcount.url import is_valid_url
from sitewordcount.word_counter import extract_text_from_html, count_words, sanitize_word

html = "<html><head><title>Hi</title></head><body><p>Hello, world!</p></body></html>"
text = extract_text_from_html(html)
print(count_words(text))              # 2
print(sanitize_word("(hello!)"))      # hello
print(is_valid_url("https://example.com"))  # True
```

### Fetching pages

`sitewordcount.http_client.HTTPClient(timeout=30.0)` collects requests and fetches them.

* `add_request(url, callback)` queues a request.
* `run()` fetches every queued URL concurrently. It calls `callback(url, body)` for each request in the order the requests finish.

`body` is a `bytes` object. It is empty when the request failed or the status was outside 200–399.

### Worker pool

`sitewordcount.thread_pool.ThreadPool(threads)` is a fixed-size pool of worker threads.

* `enqueue(func, *args, **kwargs)` returns a `concurrent.futures.Future`.
* `shutdown()` lets the workers finish the tasks already queued and then joins them. Calling `enqueue` after `shutdown()` raises `RuntimeError`.
* The pool can be used as a context manager, which calls `shutdown()` on exit.

### Processing a fetched page

`sitewordcount.cli.process_content(url, content)` takes the fetched bytes and returns a `FetchResult` dataclass with these fields:

* `url`
* `content`
* `word_count`
* `success`
* `error_message`

It also prints the progress line for the page.

## Running the tests

```
pip install .[test]
pytest
```