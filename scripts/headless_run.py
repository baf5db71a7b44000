"""Headless comparison of a warm run and a cold trapped run.

Usage: python scripts/headless_run.py
"""
import os
import sys
import logging

# Ensure project root is on sys.path when running from scripts/
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from chamber.simulation_manager import SimulationManager

logging.basicConfig(level=logging.INFO)

SCENARIOS = [
    ("warm", 50.0, False),
    ("cold trap", 5.0, True),
]

for name, temperature, trap in SCENARIOS:
    sim = SimulationManager(h2_count=6, cl2_count=10, temperature_c=temperature, trap_mode=trap, seed=12345)
    print(f"Starting headless run '{name}': T={temperature} C trap={trap}")
    for i in range(5):
        sim.run_steps(n_steps=100)
        c = sim.counts()
        print(f"  frame {sim.frame}: H2={c['H2']} Cl2={c['Cl2']} HCl={c['HCl']} reactions={c['reactions']}")

print('Headless runs complete')
