# -*- coding: utf-8 -*-
"""
Translation dictionaries for German and English.

This module contains all translatable strings for the Todo List application.
"""

TRANSLATIONS = {
    "en": {
        # Application
        "app.name": "Todo List",

        # List window
        "main.title": "Todo List",
        "main.header": "Today",
        "main.empty": "No todos yet!",
        "main.add": "Add todo",
        "main.settings": "Settings",
        "main.delete": "Delete",

        # Add dialog
        "add.title": "New Todo",
        "add.placeholder": "Enter new todo...",
        "add.button": "Add Todo",

        # Settings
        "settings.title": "Settings",
        "settings.general": "General",
        "settings.data": "Data",
        "settings.theme": "Theme:",
        "settings.theme_auto": "Auto",
        "settings.theme_light": "Light",
        "settings.theme_dark": "Dark",
        "settings.language": "Language:",
        "settings.language_auto": "Auto (System)",
        "settings.language_en": "English",
        "settings.language_de": "German",
        "settings.export": "Export Todos",
        "settings.import": "Import Todos",
        "settings.export_location": "Export folder:",

        # Transfer notices
        "transfer.export_done": "Todos exported to:\n{path}",
        "transfer.export_error": "Error exporting todos",
        "transfer.import_done": "Todos imported successfully!",
        "transfer.import_invalid": "Invalid file format",
        "transfer.import_error": "Error importing todos",
        "transfer.import_filter": "JSON files (*.json)",

        # Dialog buttons
        "dialog.save": "Save",
        "dialog.cancel": "Cancel",

        # Generic
        "error": "Error",
        "info": "Information",
        "settings.load_error": "Failed to load settings: {error}",
        "settings.save_error": "Failed to save settings: {error}",
    },
    "de": {
        # Application
        "app.name": "Aufgabenliste",

        # List window
        "main.title": "Aufgabenliste",
        "main.header": "Heute",
        "main.empty": "Noch keine Aufgaben!",
        "main.add": "Aufgabe hinzufügen",
        "main.settings": "Einstellungen",
        "main.delete": "Löschen",

        # Add dialog
        "add.title": "Neue Aufgabe",
        "add.placeholder": "Neue Aufgabe eingeben...",
        "add.button": "Aufgabe hinzufügen",

        # Settings
        "settings.title": "Einstellungen",
        "settings.general": "Allgemein",
        "settings.data": "Daten",
        "settings.theme": "Design:",
        "settings.theme_auto": "Automatisch",
        "settings.theme_light": "Hell",
        "settings.theme_dark": "Dunkel",
        "settings.language": "Sprache:",
        "settings.language_auto": "Automatisch (System)",
        "settings.language_en": "Englisch",
        "settings.language_de": "Deutsch",
        "settings.export": "Aufgaben exportieren",
        "settings.import": "Aufgaben importieren",
        "settings.export_location": "Exportordner:",

        # Transfer notices
        "transfer.export_done": "Aufgaben exportiert nach:\n{path}",
        "transfer.export_error": "Fehler beim Exportieren der Aufgaben",
        "transfer.import_done": "Aufgaben erfolgreich importiert!",
        "transfer.import_invalid": "Ungültiges Dateiformat",
        "transfer.import_error": "Fehler beim Importieren der Aufgaben",
        "transfer.import_filter": "JSON-Dateien (*.json)",

        # Dialog buttons
        "dialog.save": "Speichern",
        "dialog.cancel": "Abbrechen",

        # Generic
        "error": "Fehler",
        "info": "Information",
        "settings.load_error": "Einstellungen konnten nicht geladen werden: {error}",
        "settings.save_error": "Einstellungen konnten nicht gespeichert werden: {error}",
    },
}
