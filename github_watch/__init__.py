"""
github_watch — ожидание изменения файла в репозитории GitHub.

=== НАЗНАЧЕНИЕ ===
CLI-утилита, которая:
1. Разбирает URL вида https://github.com/owner/repo/blob/ref/path
2. Запрашивает ETag файла через GitHub API (HEAD /repos/.../contents/...)
3. Опрашивает API с фиксированным интервалом, пока ETag не изменится

=== ЗАПУСК ===
    await-github-file-change https://github.com/owner/repo/blob/main/README.md
"""

__version__ = "1.0.0"
