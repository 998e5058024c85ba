import math

from huffcodec.coders import HuffmanCoder
from huffcodec.display import CodeLengthDisplay, print_tree
from huffcodec.logger import Logger
from huffcodec.settings import BASELINE_SYMBOL_BITS, DEMO_TEXT, ENGLISH_FREQUENCIES


def main():
    print("\nHUFFMAN CODES SAMPLE APPLICATION:\n")

    logger = Logger()
    coder = HuffmanCoder(ENGLISH_FREQUENCIES, logger)

    text = DEMO_TEXT.upper()
    encoded_text = coder.encode(text)
    print(f"- Initial text ({len(text) * BASELINE_SYMBOL_BITS} bits, {len(text)} bytes): {text}")
    print(f"- Huffman compression ({len(encoded_text)} bits, {math.ceil(len(encoded_text) / 8)} bytes): {encoded_text}")
    print(f"- Huffman decompression: {coder.decode(encoded_text)}")

    print(f"- Max. bit length = {coder.get_max_bit_length()}")
    print(f"- ABL = {coder.get_average_bit_length():.2f}")
    print(f"- Entropy = {coder.get_entropy():.2f}")
    print(f"- Compression factor = {coder.get_compression_factor(text):.2f}")

    print()
    print_tree(coder.root)

    for log in logger.logs:
        print(log)

    display = CodeLengthDisplay(coder.root)
    display.generate_code_length_plot(show_graph=True)


if __name__ == "__main__":
    main()
