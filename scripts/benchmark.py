import time, argparse
# Ensure project root is on PYTHONPATH so 'src' package is importable
import sys
from pathlib import Path
ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from src.reader import read_contact_rows
from src.writer import convert_csv

HEADER = "FIRSTNAME,LASTNAME,TEL,MOBILE,EMAIL,NOTE"

def build_large_sample(rows=20000, out_csv="samples/large.csv"):
    out = Path(out_csv)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8", newline="") as fh:
        fh.write(HEADER + "\n")
        for i in range(rows):
            fh.write(f"First{i},Last{i},01{i:08d},06{i:08d},user{i}@example.com,Row {i}\n")
    return out

def time_read(csv_path):
    start = time.time()
    rows = read_contact_rows(csv_path)
    return time.time() - start, len(rows)

def time_convert(csv_path):
    start = time.time()
    vcf_path = convert_csv(csv_path)
    return time.time() - start, vcf_path

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Simple benchmark: CSV read vs full CSV -> VCF conversion")
    parser.add_argument("--rows", type=int, default=20000, help="number of rows to generate")
    args = parser.parse_args()
    rows = args.rows

    print("Building large CSV with rows =", rows)
    large_csv = build_large_sample(rows=rows)
    print("Large CSV created:", large_csv)

    read_time, n = time_read(large_csv)
    convert_time, vcf_path = time_convert(large_csv)
    size = vcf_path.stat().st_size
    print(f"CSV read time: {read_time:.3f}s, full conversion time: {convert_time:.3f}s, rows={n}, vcf={vcf_path} ({size} bytes)")
