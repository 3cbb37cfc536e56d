from padron.main import main

if __name__ == "__main__":
    # Reads cedulas.txt (or the inline list) and writes resultados_cedulas.csv
    # under PADRON_DATA_DIR, defaulting to the current directory.
    raise SystemExit(main())
