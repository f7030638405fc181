"""
Example: Vocabulary trimming.

Count words, keep the frequent ones, re-read the text against the new index
space and fit a Poisson model to sentence lengths.
"""

import numpy as np
from catdomain import CountingDomainRegistry, CategoricalObservation, Poisson


TEXT = [
    "the cat sat on the mat",
    "the dog sat on the log",
    "a cat and a dog met",
    "the end",
]


def main():
    words = CountingDomainRegistry("word")

    # Pass 1: count
    for sentence in TEXT:
        words.index_all(sentence.split())

    print(f"Distinct words before trim: {words.alloc_size()}")
    for w, c in zip(words.values(), words.counts()):
        print(f"  {w:<6} {c}")

    # Trim
    words.trim_below_count(2)
    print(f"\nDistinct words after trim_below_count(2): {words.alloc_size()}")
    print(f"  {list(words.values())}")

    # Pass 2: rebuild handles
    encoded = []
    for sentence in TEXT:
        obs = [CategoricalObservation(words, w) for w in sentence.split() if w in words]
        encoded.append(np.array([o.index for o in obs], dtype=np.int64))

    print("\nEncoded sentences:")
    for sentence, ids in zip(TEXT, encoded):
        print(f"  {sentence!r:<28} -> {ids.tolist()}")

    # Sentence lengths under a Poisson model
    lengths = [len(s.split()) for s in TEXT]
    model = Poisson(1.0)
    model.estimate(lengths)
    print(f"\nPoisson MLE of sentence length: lambda = {model.lam:.3f}")
    print(f"P(length == 6) = {model.pr(6):.4f}")


if __name__ == "__main__":
    main()
