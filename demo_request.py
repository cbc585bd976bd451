#!/usr/bin/env python3
"""Demo-Request gegen den laufenden Oracle-Endpoint"""

import json
import os
import sys

import requests

BASE_URL = os.getenv("ORACLE_BASE_URL", "http://localhost:8000")
API_KEY = os.getenv("MRE_API_KEY", "")

payload = {
    "prompt": "Erkläre in zwei Sätzen, warum der Himmel blau ist.",
    "baseline_answer": (
        "Sonnenlicht wird an den Molekülen der Atmosphäre gestreut, kurzwelliges blaues Licht "
        "deutlich stärker als rotes (Rayleigh-Streuung). Deshalb erreicht uns aus allen "
        "Richtungen des Himmels vor allem blaues Licht."
    ),
    "mre_answer": "Blaues Licht wird in der Atmosphäre stärker gestreut als rotes, daher wirkt der Himmel blau.",
}

print("=" * 70)
print("INPUT:")
print("=" * 70)
print(json.dumps(payload, indent=2, ensure_ascii=False))
print()

try:
    response = requests.post(
        f"{BASE_URL}/oracle/eval",
        json=payload,
        headers={"Authorization": f"Bearer {API_KEY}"},
        timeout=60,
    )
    result = response.json()
    if response.status_code != 200:
        print(f"❌ HTTP {response.status_code}: {json.dumps(result, ensure_ascii=False)}")
        sys.exit(1)
except requests.exceptions.ConnectionError:
    print(f"❌ Server nicht erreichbar unter {BASE_URL}")
    print("   Bitte starten Sie den Server mit: uvicorn app.server:app --port 8000")
    sys.exit(1)
except Exception as e:
    print(f"❌ Fehler: {e}")
    sys.exit(1)

print("=" * 70)
print("OUTPUT: SUB-SCORES (5 Dimensionen)")
print("=" * 70)
print(f"  Semantic Similarity:   {result['semantic_similarity']:.3f}")
print(f"  Instruction Fidelity:  {result['instruction_fidelity']:.3f}")
print(f"  Factual Consistency:   {result['factual_consistency']:.3f}")
print(f"  Style Preservation:    {result['style_preservation']:.3f}")
print(f"  Hallucination Risk:    {result['hallucination_risk']:.3f}")
print()

print("=" * 70)
print("OUTPUT: ORACLE SCORE")
print("=" * 70)
print(f"  Oracle Score: {result['oracle_score']:.3f}")
print(f"  Erklärung:    {result['raw_model_explanation']}")
print()

print("=" * 70)
print("✅ Demo abgeschlossen")
print("=" * 70)
