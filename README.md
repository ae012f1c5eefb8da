# feynterm

feynterm grades a written answer against a reference text by the keywords
the two have in common. Common function words are dropped: "the", "and",
"of", pronouns, auxiliaries, negations and the like. The remaining words are
lower-cased and compared one by one, and the share of matches becomes a
letter grade.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `feynterm`

```
feynterm [--pdf FILE] [--mutool PATH] [--templates DIR]
```

It shows a banner and asks for an input method:

1. **Manual input**: type the reference text and the answer at the prompt.
2. **File input**: give the names of two plain text files. At most 4999
   bytes of each are read.
3. **PDF input**: runs the OCR pipeline on the PDF (see below), then carries
   on as in file input and asks for the two text files.

The keywords of the reference and of the answer are written, one per line,
to `reference.csv` and `user_input.csv` in the current directory. Then you
choose the default grading scale or a custom one, and the result is
printed:

```
Results:
Correct answers: 3/5
Percentage: 60%
Grade: C
```

Options:

- `--pdf`: the PDF for PDF input mode (default `input.pdf`).
- `--mutool`: the `mutool` program (default
  `Image_Processing_And_OCR/mutool`, or `mutool.exe` on Windows).
- `--templates`: the folder of character templates (default
  `CharacterTemplates`).

Any other menu choice prints `Invalid choice. Exiting.` and exits with
status 1.

### `feynterm-grade`

```
feynterm-grade
```

It asks for the grading scale, then for the answer-key CSV and the user
answer CSV, and prints the same result. Each file holds one answer per line.
Case and surrounding whitespace are ignored. If a file cannot be read,
`Error reading files!` is printed. If either file is empty,
`Error: Answer counts don't match!` is printed.

## Grading

Default scale:

| Grade | Minimum percentage |
|-------|--------------------|
| S     | 90                 |
| A     | 80                 |
| B     | 70                 |
| C     | 60                 |
| D     | 50                 |
| F     | 0                  |

A custom scale keeps the same six bands. For each band you enter its letter,
which is upper-cased. For every band but the last you also enter the minimum
percentage of the next band down. Enter the grades from highest to lowest.

The number of correct answers is the count of the user's answers that occur
anywhere in the key. A repeated answer is counted each time it appears. The
percentage is that count times 100, divided by the number of key answers and
rounded down.

## Library use

```python
from feynterm.text_processor import extract_words, write_csv
from feynterm.matching import read_answers, count_matches
from feynterm.grading import default_grading_scale, calculate_grade

print(extract_words("The mitochondria is the powerhouse of the cell"))
# ['mitochondria', 'powerhouse', 'cell']

write_csv("reference.csv", "Photosynthesis converts light into chemical energy")
write_csv("user_input.csv", "Photosynthesis turns light into energy")

key = read_answers("reference.csv")
user = read_answers("user_input.csv")
matches = count_matches(key, user)                                   # 3
print(calculate_grade(matches, len(key), default_grading_scale()))   # C
```

- `feynterm.stopwords.is_ignored(word)` tells whether a word is on the
  ignore list.
- `feynterm.text_processor`: `extract_words`, `write_csv`,
  `read_text_file`, `manual_input_mode`, `file_input_mode`.
- `feynterm.matching`: `read_answers`, `count_matches`. `count_matches`
  raises `AnswerCountError` when either list is empty.
- `feynterm.grading`: `GradeBoundary`, `default_grading_scale`,
  `configure_grading_scale`, `calculate_grade`. `calculate_grade` returns
  `'?'` when the total is zero.

## The OCR pipeline

`feynterm.pdf_processor.pdf_input_mode(pdf_file, workdir, mutool, template_dir)`
runs these steps in order:

1. `img_processing.get_pdf_page_count` reads the page count from
   `mutool info`.
2. `img_processing.render_pdf_pages_to_png` dumps the PDF's text to
   `tmp_resources.txt` with `mutool draw -F txt` and renders every page to
   `output_<n>.png`.
3. `img_processing.png_to_pgm_format` converts each PNG to a black-and-white
   plain PGM. A pixel becomes black when its grey value is below 120.
4. `segmentation.line_segmentation`, `word_segmentation` and
   `letter_segmentation` cut the pages into `Lines/line_<n>.pgm`,
   `Words/word_<n>.pgm` and `Letters/letter_<n>.pgm`. Words are separated
   by at least five blank columns and letters by at least one. Every piece
   gets a two-pixel white border. `rescale_letters` then resizes each letter
   to 20×20 by bilinear interpolation.
5. `template_matching.load_templates` loads `template_ord<code>.pgm` for
   codes 33–126 from the template folder. Each letter is matched to the
   template with the smallest modified Hausdorff distance, or `?` if no
   distance is below 3.5.
6. `template_matching.cleanup` removes the `Lines`, `Words` and `Letters`
   folders, `output_1.png`, `output_1.pgm` and `tmp_resources.txt`.

Errors are raised as `img_processing.PdfProcessingError`. The image and
segmentation steps can also be used alone, through `segmentation.PgmImage`,
`read_pgm`, `write_pgm`, `segment_lines`, `segment_words`,
`segment_letters` and `rescale`.

## What it does not do

- It ships no `mutool` program and no character templates. Both must be
  supplied, or PDF input fails or recognises nothing.
- Recognised text is only written when `output.txt` already exists in the
  working folder. Otherwise the text that `mutool` dumped from the PDF is
  moved to `output.txt`, and no OCR result is written.
- PDF input does not grade the PDF by itself. Afterwards you are asked for
  the two text files to compare, for example `output.txt` and a reference.
- Cleanup removes only the first page's PNG and PGM. The images of later
  pages stay in place.