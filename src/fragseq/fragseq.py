# src/fragseq/fragseq.py
from __future__ import annotations
import argparse, logging, pathlib, sys
from fragseq.assembly.fragment import Fragment, InvalidAlphabetError
from fragseq.pipeline import run_assembly
from fragseq.utility.utils import setup_logging, load_config, config_value


def main(argv: list[str] | None = None) -> int:
    cfg = load_config()
    ap = argparse.ArgumentParser(
    prog="fragseq", description="FragSeq greedy overlap assembly of short reads into contigs")
    # global flags
    ap.add_argument("-v", "--verbose", action="count", default=0, help="-v: info, -vv: use for debugging")
    sp = ap.add_subparsers(dest="cmd", required=True)

    # assemble sub command
    p_asm = sp.add_parser("assemble", help="Greedy assembly of a FASTA of reads")
    p_asm.add_argument("-i", "--input", required=True, metavar="FASTA", help="Reads to assemble (A/C/G/T only)")
    p_asm.add_argument("-o", "--output", required=True, metavar="FASTA", help="Contigs FASTA to write")
    p_asm.add_argument("--min-overlap", type=int, default=config_value(cfg, "assembly", "min_overlap"),
                       help="smallest suffix/prefix overlap that allows a merge (default: %(default)s)")
    p_asm.add_argument("--report", metavar="TSV", help="Also write a per-contig length / GC%% table")
    p_asm.add_argument("--prefix", default=config_value(cfg, "assembly", "contig_prefix"),
                       help="contig id prefix (default: %(default)s)")

    # overlap of two sequences
    p_ovl = sp.add_parser("overlap", help="Show overlap and merge of two sequences")
    p_ovl.add_argument("left", help="sequence whose suffix is compared")
    p_ovl.add_argument("right", help="sequence whose prefix is compared")

    args = ap.parse_args(argv)

    LEVEL = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    setup_logging(level=LEVEL)

    try:
        if args.cmd == "assemble":
            if args.min_overlap < 1:
                ap.error("--min-overlap must be at least 1")
            run_assembly(
                    pathlib.Path(args.input),
                    pathlib.Path(args.output),
                    min_overlap=args.min_overlap,
                    report_tsv=pathlib.Path(args.report) if args.report else None,
                    prefix=args.prefix,
                    )
            print("✓ contigs →", args.output)
            if args.report:
                print("✓ report  →", args.report)

        elif args.cmd == "overlap":
            left, right = Fragment(args.left), Fragment(args.right)
            print(f"overlap\t{left.calculate_overlap(right)}")
            print(f"merged\t{left.merged_with(right)}")

    except (InvalidAlphabetError, FileNotFoundError) as e:
        logging.error(e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
