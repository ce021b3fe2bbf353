# ftssl

A small message digest tool with pure-Python implementations of MD5,
SHA-224, SHA-256, SHA-384 and SHA-512, and a command line in front of them.

## Installation

    pip install .

## Command line

Hash files:

    ftssl md5 notes.txt
    ftssl sha256 notes.txt other.txt

The digest commands are `md5`, `sha256`, `sha224`, `sha512` and `sha384`.
Options come after the digest name and before any files. They are handled
in the order given, so `-q` and `-r` only affect the output that follows them:

- `-p` read all of standard input, echo it, then print its digest
- `-q` quiet mode: print only the digest
- `-r` reverse the output format: digest first, then the name
- `-s STRING` print the digest of the given string

With no files and no `-p` or `-s`, standard input is hashed and only the
digest is printed:

    echo -n "hello" | ftssl sha512

Example output:

    $ ftssl md5 -s "abc"
    MD5 ("abc") = 900150983cd24fb0d6963f7d28e17f72
    $ ftssl md5 -r -s "abc"
    900150983cd24fb0d6963f7d28e17f72 "abc"

Errors are written to standard output in the form
`ft_ssl: <reason> '<argument>'`, for example
`ft_ssl: Wrong option used '-x'` or `ft_ssl: No such file 'missing.txt'`.
A file that cannot be opened is reported and the remaining files are still
hashed. An unknown command is reported and followed by the usage text.

Running `ftssl` without arguments starts an interactive prompt
(`ft_ssl> `) that accepts the same commands, plus `help` (print the usage
text) and `exit`. The prompt also ends at end of input. An argument that
starts with a double quote may contain spaces up to the closing quote; the
quotes are dropped.

## Library

    from ftssl.md5 import md5
    from ftssl.sha256 import sha256, sha224
    from ftssl.sha512 import sha512, sha384

    md5(b"abc")      # '900150983cd24fb0d6963f7d28e17f72'
    sha256(b"abc")   # 'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'

Each function takes bytes, a string (encoded as UTF-8) or a binary file
object and returns the digest as a lower-case hexadecimal string.

Other modules:

- `ftssl.common` holds the shared pieces: `right_rotate`, `right_rotate64`,
  `reverse_bytes`, `encode_length`, `iter_blocks`, `padded_blocks` and
  `hex_digest`.
- `ftssl.sha256` and `ftssl.sha512` also expose the round helpers
  (`ch`, `maj`, `rotation_sum`, `prepare_msg_schedule`; `ch64`, `maj64`,
  `sum64`, `prepare_message_schedule64`), and `ftssl.md5` exposes
  `first_round` … `fourth_round` and `left_rotate`.
- `ftssl.args.split_arg_line` splits a prompt line into an argument list
  headed by the program name.
- `ftssl.cli` has `main`, `dispatch`, `run_digest`, `format_output`,
  `print_help`, the `Options` dataclass and the `CommandError` exception.

## What it does not do

Only message digests are provided. There are no ciphers, no encoding
commands such as base64, and no HMAC or key handling.

## Tests

    pip install .[test]
    pytest